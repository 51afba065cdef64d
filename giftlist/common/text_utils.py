"""
Text Utilities

Shared helpers for cleaning scraped text and reading prices.
"""

import re
from typing import Optional, Union

_PRICE_PATTERN = re.compile(r'(\d+(?:\.\d+)?)')


def clean_text(text: Optional[str]) -> str:
    """Collapse internal whitespace and strip the ends."""
    if not text:
        return ""
    return ' '.join(text.split()).strip()


def parse_price(text: Union[str, int, float, None]) -> Optional[float]:
    """
    Parse a price out of scraped text.

    Currency symbols and thousands separators are removed and the first
    decimal number wins. Free or missing prices are reported as absent.

    Args:
        text: Raw price text (e.g., "$1,234.56", "Now $12.99") or a number

    Returns:
        Positive price as float, or None if no usable price was found

    Examples:
        >>> parse_price("$1,234.56")
        1234.56
        >>> parse_price("Free") is None
        True
    """
    if text is None or isinstance(text, bool):
        return None

    cleaned = str(text).replace('$', '').replace(',', '').strip()
    match = _PRICE_PATTERN.search(cleaned)
    if not match:
        return None

    price = float(match.group(1))
    return price if price > 0 else None
