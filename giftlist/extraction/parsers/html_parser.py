"""
HTML Content Parser

Selector helpers shared by the retailer strategies:
- First non-empty text across an ordered list of CSS selectors
- First usable attribute value across (selector, attribute) pairs
- Open Graph / meta tag lookups
- Page title

Each retailer strategy lists its selectors in priority order and lets
this parser pick the first hit.
"""

from typing import Iterable, Optional, Sequence, Tuple

from bs4 import BeautifulSoup

from ...common.text_utils import clean_text, parse_price
from ..url_utils import is_valid_image_url, resolve_url

# (CSS selector, attribute) pairs for attribute lookups
AttrSelector = Tuple[str, str]


def make_soup(html: str) -> BeautifulSoup:
    """Parse page HTML with lxml."""
    return BeautifulSoup(html or "", "lxml")


class HTMLContentParser:
    """
    Queries a product page by selector priority.

    Usage:
        parser = HTMLContentParser(html, url)
        name = parser.first_text(['#productTitle', 'h1'])
        image = parser.first_image(parser.attrs([('#landingImage', 'src')]))
    """

    def __init__(self, html: str, url: str = ""):
        """
        Initialize the HTML parser.

        Args:
            html: Raw page HTML
            url: Page URL, used to resolve relative image links
        """
        self.html = html or ""
        self.url = url
        self.soup = make_soup(self.html)

    def first_text(self, selectors: Sequence[str]) -> str:
        """
        Text of the first selector that matches an element with text.

        Returns:
            Whitespace-collapsed text or empty string
        """
        for selector in selectors:
            element = self.soup.select_one(selector)
            if element:
                text = clean_text(element.get_text())
                if text:
                    return text
        return ""

    def texts(self, selectors: Sequence[str]) -> Iterable[str]:
        """Yield the text of each selector's first match, in order."""
        for selector in selectors:
            element = self.soup.select_one(selector)
            if element:
                text = clean_text(element.get_text())
                if text:
                    yield text

    def attrs(self, candidates: Sequence[AttrSelector]) -> Iterable[str]:
        """Yield non-empty attribute values for each (selector, attribute) pair."""
        for selector, attribute in candidates:
            element = self.soup.select_one(selector)
            if element:
                value = element.get(attribute)
                if isinstance(value, list):
                    value = ' '.join(value)
                if value and value.strip():
                    yield value.strip()

    def first_attr(self, candidates: Sequence[AttrSelector]) -> str:
        """First non-empty attribute value across (selector, attribute) pairs."""
        return next(iter(self.attrs(candidates)), "")

    def meta_content(self, *keys: str) -> str:
        """
        Content of the first <meta> whose property or name matches a key.

        Args:
            keys: Meta keys such as "og:title" or "twitter:image"
        """
        for key in keys:
            for attribute in ('property', 'name'):
                element = self.soup.find('meta', attrs={attribute: key})
                if element and element.get('content'):
                    content = element['content'].strip()
                    if content:
                        return content
        return ""

    def page_title(self) -> str:
        """Text of the <title> element."""
        element = self.soup.find('title')
        return clean_text(element.get_text()) if element else ""

    def first_price(self, candidates: Iterable[str]) -> Optional[float]:
        """First candidate text that parses to a positive price."""
        for candidate in candidates:
            price = parse_price(candidate)
            if price is not None:
                return price
        return None

    def first_image(self, candidates: Iterable[str]) -> Optional[str]:
        """First candidate that resolves to a plausible image URL."""
        for candidate in candidates:
            resolved = resolve_url(self.url, candidate)
            if is_valid_image_url(resolved):
                return resolved
        return None

