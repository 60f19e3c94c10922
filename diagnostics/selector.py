"""
CSS selector generation for offending elements.

Engines report findings against element references, not locators. The
selector built here is a child-combinator chain from the nearest
id-bearing ancestor (or the root) down to the element, e.g.:

    #main > ul > li:nth-child(3) > a
"""
from typing import List, Optional
import logging

from common.dom import Element

logger = logging.getLogger(__name__)

SELECTOR_SEPARATOR = " > "


def build_selector(element: Optional[Element]) -> str:
    """
    Build a CSS selector locating an element within its document.

    Args:
        element: Element to locate; None or non-element nodes yield ""

    Returns:
        Selector segments joined by " > ", outermost first
    """
    segments: List[str] = []
    node = element

    while node is not None and node.is_element():
        segments.insert(0, build_identifier(node))

        # An id is assumed unique, so nothing above it is needed
        if node.get_id():
            break
        node = node.get_parent()

    return SELECTOR_SEPARATOR.join(segments)


def build_identifier(element: Element) -> str:
    """
    Build the selector segment for a single element.

    Args:
        element: Element node

    Returns:
        "#id" when the element has an id, otherwise the lowercased tag name,
        suffixed with :nth-child(N) when same-tag siblings exist
    """
    element_id = element.get_id()
    if element_id:
        return f"#{element_id}"

    identifier = element.get_tag_name().lower()
    parent = element.get_parent()
    if parent is None:
        return identifier

    siblings = parent.get_element_children()
    position = _position_of(element, siblings)
    if position is not None and not _is_only_sibling_of_type(element, siblings):
        # Positional among all element siblings, not :nth-of-type
        identifier += f":nth-child({position + 1})"

    return identifier


def _position_of(element: Element, siblings: List[Element]) -> Optional[int]:
    for index, sibling in enumerate(siblings):
        if element.same_node(sibling):
            return index
    logger.debug(f"Element <{element.get_tag_name()}> not found among its parent's children")
    return None


def _is_only_sibling_of_type(element: Element, siblings: List[Element]) -> bool:
    tag_name = element.get_tag_name()
    same_tag = [s for s in siblings if s.get_tag_name() == tag_name]
    return len(same_tag) <= 1
