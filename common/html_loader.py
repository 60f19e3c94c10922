import lxml.etree
import lxml.html
from typing import List, Optional
import logging

from common.dom import LxmlElement

logger = logging.getLogger(__name__)


class HTMLParsingError(Exception):
    """Exception raised when HTML parsing fails."""
    pass


class HtmlDocument:
    """Parsed HTML document exposing its nodes through the Element interface."""

    def __init__(self, tree: lxml.etree._ElementTree):
        self.tree = tree

    @property
    def root(self) -> LxmlElement:
        return LxmlElement(self.tree.getroot())

    def find(self, xpath: str) -> List[LxmlElement]:
        """
        Find elements matching an XPath expression.

        Args:
            xpath: XPath expression evaluated against the document root

        Returns:
            Matching elements in document order (non-element results skipped)
        """
        results = self.tree.getroot().xpath(xpath)
        return [LxmlElement(node) for node in results if isinstance(node, lxml.etree._Element)]

    def get_element_by_id(self, element_id: str) -> Optional[LxmlElement]:
        matches = self.tree.getroot().xpath("//*[@id=$element_id]", element_id=element_id)
        if not matches:
            return None
        return LxmlElement(matches[0])


class SafeHTMLLoader:
    """HTML loader with network access disabled."""

    def parse(self, content) -> HtmlDocument:
        """
        Parse HTML markup into a document.

        Args:
            content: Raw HTML as bytes or str

        Returns:
            Parsed HTML document

        Raises:
            HTMLParsingError: If parsing fails
        """
        if not content or not content.strip():
            raise HTMLParsingError("HTML parsing failed: document is empty")

        try:
            parser = lxml.html.HTMLParser(
                no_network=True,
                huge_tree=False,
                remove_comments=False
            )

            root = lxml.html.document_fromstring(content, parser=parser)
            tree = lxml.etree.ElementTree(root)
            logger.debug(f"Parsed HTML document with root <{root.tag}>")
            return HtmlDocument(tree)

        except lxml.etree.ParserError as e:
            raise HTMLParsingError(f"HTML parser error: {e}")
        except Exception as e:
            raise HTMLParsingError(f"HTML parsing failed: {e}")
