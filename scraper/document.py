"""Parsed page wrapper used by the extractors."""

from typing import List, Optional
from urllib.parse import urljoin
from bs4 import BeautifulSoup
from bs4.element import Tag


def element_text(element: Tag) -> str:
    """Return the full text content of an element, like the DOM's textContent."""
    return element.get_text()


def visible_text(element: Tag) -> str:
    """Return the element text with runs of whitespace collapsed."""
    return ' '.join(element.get_text(' ').split())


class Document:
    """
    An in-memory page tree queryable by CSS selector.

    Attributes:
        url: URL the page was loaded from, used to resolve relative references
        soup: The underlying BeautifulSoup tree
    """

    def __init__(self, html: str, url: str = ""):
        self.url = url
        self.soup = BeautifulSoup(html, 'html.parser')

    def select(self, selector: str) -> List[Tag]:
        """Return all elements matching a CSS selector, in document order."""
        return self.soup.select(selector)

    def select_one(self, selector: str) -> Optional[Tag]:
        """Return the first element matching a CSS selector, or None."""
        return self.soup.select_one(selector)

    def absolute_url(self, reference: str) -> str:
        """Resolve an href/src attribute against the document URL."""
        return urljoin(self.url, reference.strip())

    def __repr__(self) -> str:
        return f"Document(url={self.url!r})"
