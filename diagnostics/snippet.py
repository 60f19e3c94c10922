from typing import Optional

from common.dom import Element

# Inner markup longer than this is shortened inside the outer markup
INNER_MARKUP_LIMIT = 31
# Hard cap on the final snippet, before the ellipsis
CONTEXT_LIMIT = 250
ELLIPSIS = "..."


def build_context(element: Optional[Element]) -> Optional[str]:
    """
    Build a bounded-length markup snippet for an element.

    Args:
        element: Offending element, may be None

    Returns:
        Outer markup with long inner markup shortened and the whole string
        capped at CONTEXT_LIMIT characters plus an ellipsis, or None when
        the element has no serializable markup
    """
    if element is None:
        return None

    outer_markup = element.get_outer_markup()
    if not outer_markup:
        return None

    inner_markup = element.get_inner_markup() or ""
    if len(inner_markup) > INNER_MARKUP_LIMIT:
        shortened = inner_markup[:INNER_MARKUP_LIMIT] + ELLIPSIS
        outer_markup = outer_markup.replace(inner_markup, shortened, 1)

    if len(outer_markup) > CONTEXT_LIMIT:
        outer_markup = outer_markup[:CONTEXT_LIMIT] + ELLIPSIS

    return outer_markup
