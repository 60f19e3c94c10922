"""
Element capability interface used by the selector and snippet builders.

Any host document model can be checked as long as it exposes its elements
through this interface. LxmlElement is the binding for lxml.html trees.
"""
from abc import ABC, abstractmethod
from html import escape
from typing import List, Optional

import lxml.html

# Serialized without entity escaping by the HTML serializer
RAW_TEXT_TAGS = {"script", "style"}


class Element(ABC):
    """Read-only view of a DOM node."""

    @abstractmethod
    def is_element(self) -> bool:
        """Return True for element nodes, False for documents or other nodes."""
        pass

    @abstractmethod
    def get_id(self) -> Optional[str]:
        pass

    @abstractmethod
    def get_tag_name(self) -> str:
        pass

    @abstractmethod
    def get_parent(self) -> Optional["Element"]:
        pass

    @abstractmethod
    def get_element_children(self) -> List["Element"]:
        """Child nodes that are themselves elements, in document order."""
        pass

    @abstractmethod
    def get_outer_markup(self) -> Optional[str]:
        pass

    @abstractmethod
    def get_inner_markup(self) -> Optional[str]:
        pass

    def same_node(self, other: "Element") -> bool:
        return self is other


class LxmlElement(Element):
    """Element binding over an lxml.html element."""

    def __init__(self, node: lxml.html.HtmlElement):
        self.node = node

    def __eq__(self, other):
        if not isinstance(other, LxmlElement):
            return NotImplemented
        return self.node is other.node

    def __hash__(self):
        return id(self.node)

    def __repr__(self):
        return f"LxmlElement(<{self.get_tag_name()}>)"

    def same_node(self, other: Element) -> bool:
        return self == other

    def is_element(self) -> bool:
        # Comments and processing instructions carry a callable tag
        return isinstance(self.node.tag, str)

    def get_id(self) -> Optional[str]:
        value = self.node.get("id")
        return value or None

    def get_tag_name(self) -> str:
        return self.node.tag if self.is_element() else ""

    def get_parent(self) -> Optional[Element]:
        parent = self.node.getparent()
        if parent is None:
            return None
        return LxmlElement(parent)

    def get_element_children(self) -> List[Element]:
        return [LxmlElement(child) for child in self.node if isinstance(child.tag, str)]

    def get_outer_markup(self) -> Optional[str]:
        if not self.is_element():
            return None
        return lxml.html.tostring(self.node, encoding="unicode", with_tail=False)

    def get_inner_markup(self) -> Optional[str]:
        if not self.is_element():
            return None
        text = self.node.text or ""
        if text and self.node.tag not in RAW_TEXT_TAGS:
            text = escape(text, quote=False)
        parts = [text]
        for child in self.node:
            parts.append(lxml.html.tostring(child, encoding="unicode", with_tail=True))
        return "".join(parts)
