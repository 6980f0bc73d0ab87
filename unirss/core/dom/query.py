"""Selector-based queries over a parsed HTML document."""

import logging

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from unirss.exceptions import ParseError, SelectorError
from unirss.utils.text import strip_invalid_xml_chars
from unirss.utils.urls import resolve_url


class DomQuery:
    """Parses HTML once and answers the selector queries both extraction strategies use.

    ``root`` arguments accept any element of the document; None means the
    whole document.

    Attributes:
        base_url: URL relative links are resolved against
        soup: Parsed document

    """

    def __init__(self, html: str, base_url: str, parser: str = 'lxml'):
        """Parse the document.

        Args:
            html: Raw markup
            base_url: Page URL used to resolve relative links
            parser: BeautifulSoup tree builder ('lxml' or 'html.parser'). Defaults to 'lxml'.

        Raises:
            ParseError: If no parse tree could be built

        """
        self.base_url = base_url
        self.logger = logging.getLogger(__name__)
        try:
            self.soup = BeautifulSoup(html, parser)
        except Exception as e:
            raise ParseError(f'Could not parse HTML from {base_url}: {e}') from e

    def select_all(self, root: Tag | None, selector: str) -> list[Tag]:
        """Return every descendant of ``root`` matching ``selector`` in document order.

        Raises:
            SelectorError: If the selector is not valid CSS

        """
        scope = self.soup if root is None else root
        try:
            return scope.select(selector)
        except (SelectorSyntaxError, ValueError) as e:
            raise SelectorError(selector, str(e)) from e

    def select_one(self, root: Tag | None, selector: str) -> Tag | None:
        """Return the first descendant of ``root`` matching ``selector``, or None.

        Raises:
            SelectorError: If the selector is not valid CSS

        """
        scope = self.soup if root is None else root
        try:
            return scope.select_one(selector)
        except (SelectorSyntaxError, ValueError) as e:
            raise SelectorError(selector, str(e)) from e

    @staticmethod
    def attr(element: Tag, name: str) -> str | None:
        """Return an attribute value, joining multi-valued attributes like ``class``."""
        value = element.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            value = ' '.join(value)
        return strip_invalid_xml_chars(str(value))

    @staticmethod
    def text(element: Tag, trim: bool = True) -> str:
        """Return the visible text of an element, whitespace-collapsed when ``trim`` is set.

        Characters that XML cannot carry are dropped.
        """
        text = strip_invalid_xml_chars(element.get_text(' ' if trim else ''))
        if trim:
            return ' '.join(text.split())
        return text

    @staticmethod
    def children(element: Tag, name: str) -> list[Tag]:
        """Return the direct child elements of ``element`` with tag ``name``, in order."""
        return element.find_all(name, recursive=False)

    @staticmethod
    def parent(element: Tag) -> Tag:
        """Return the immediate parent element, or the element itself if it has none."""
        parent = element.find_parent()
        return parent if parent is not None else element

    def resolve_url(self, maybe_relative: str, base: str | None = None) -> str:
        """Resolve a link against the page URL (or ``base`` when given)."""
        return resolve_url(base or self.base_url, maybe_relative)

    def title(self) -> str | None:
        """Return the document title with whitespace collapsed, or None if missing or blank."""
        title_tag = self.soup.find('title')
        if title_tag is None:
            return None
        title = ' '.join(strip_invalid_xml_chars(title_tag.get_text()).split())
        return title or None
