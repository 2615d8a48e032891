"""
Document Adapter

Read-only view over a parsed HTML page. Wraps a BeautifulSoup tree
(lxml parser) and exposes the handful of queries the analyzer needs:
CSS selection, lookup by id and the per-element accessors.

Invalid CSS never escapes this module - a query the selector engine
cannot parse simply matches nothing.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag
import soupsieve
from soupsieve import SelectorSyntaxError

logger = logging.getLogger(__name__)


class Document:
    """Queryable, immutable wrapper around a parsed page"""

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def from_html(cls, html: str) -> "Document":
        """Parse raw markup into a Document"""
        return cls(BeautifulSoup(html, 'lxml'))

    def query(self, selector: str) -> List[Tag]:
        """Return all elements matching a CSS selector, [] on invalid syntax"""
        try:
            return self.soup.select(selector)
        except (SelectorSyntaxError, ValueError, NotImplementedError) as e:
            logger.debug(f"Skipping unparsable selector {selector!r}: {e}")
            return []

    def count(self, selector: str) -> int:
        return len(self.query(selector))

    def get_element_by_id(self, element_id: str) -> Optional[Tag]:
        """First element whose id attribute equals element_id exactly"""
        if not element_id:
            return None
        return self.soup.find(id=element_id)

    def all_elements(self) -> List[Tag]:
        """Every element in document order"""
        return self.soup.find_all(True)

    def elements_with_id(self) -> List[Tag]:
        return self.soup.find_all(id=True)


# ==================== Element Accessors ====================

def tag_name(element: Tag) -> str:
    return (element.name or "").lower()


def element_id(element: Tag) -> Optional[str]:
    value = element.get('id')
    if isinstance(value, list):
        value = " ".join(value)
    return value


def class_tokens(element: Tag) -> List[str]:
    """Ordered class tokens of an element (empty list if it has none)"""
    classes = element.get('class') or []
    if isinstance(classes, str):
        classes = classes.split()
    return list(classes)


def attribute(element: Tag, name: str) -> Optional[str]:
    value = element.get(name)
    if isinstance(value, list):
        # multi-valued attributes (class, rel, ...) come back as lists
        value = " ".join(value)
    return value


def parent_of(element: Tag) -> Optional[Tag]:
    """Parent element, or None for the root (the document object is not an element)"""
    parent = element.parent
    if parent is None or isinstance(parent, BeautifulSoup):
        return None
    return parent


def children_of(element: Tag) -> List[Tag]:
    return element.find_all(True, recursive=False)


def text_content(element: Tag) -> str:
    """Concatenation of all descendant text"""
    return element.get_text()


def css_identifier(value: str) -> str:
    """Escape a class or id token for use after `.` or `#` (md:flex -> md\\:flex)"""
    return soupsieve.escape(value)


def quote_css_string(value: str) -> str:
    """Double-quote a value for use inside a CSS selector"""
    escaped = value.replace('\\', '\\\\').replace('"', '\\"')
    return f'"{escaped}"'
