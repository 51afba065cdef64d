"""
Product page parsers.

Each retailer strategy is a pure function (html, url) -> ProductMetadata:
- parse_amazon: JSON-LD Product data, then Amazon DOM selectors
- parse_target / parse_walmart / parse_bestbuy: retailer DOM selectors
- parse_generic: Open Graph / meta tags, then JSON-LD

Shared helpers:
- HTMLContentParser: selector-priority lookups
- StructuredDataParser: JSON-LD Product objects
"""

from typing import Callable, Dict

from ...models import ProductMetadata, Retailer
from .amazon import parse_amazon
from .bestbuy import parse_bestbuy
from .generic import parse_generic
from .html_parser import HTMLContentParser
from .structured_data import StructuredDataParser
from .target import parse_target
from .walmart import parse_walmart

ProductParser = Callable[[str, str], ProductMetadata]

# Retailers with a dedicated parser; everything else uses parse_generic
PARSERS: Dict[Retailer, ProductParser] = {
    Retailer.AMAZON: parse_amazon,
    Retailer.TARGET: parse_target,
    Retailer.WALMART: parse_walmart,
    Retailer.BEST_BUY: parse_bestbuy,
}


def get_parser(retailer: Retailer) -> ProductParser:
    """Parser for a retailer, falling back to the generic meta-tag parser."""
    return PARSERS.get(retailer, parse_generic)


__all__ = [
    'PARSERS',
    'ProductParser',
    'get_parser',
    'parse_amazon',
    'parse_target',
    'parse_walmart',
    'parse_bestbuy',
    'parse_generic',
    'HTMLContentParser',
    'StructuredDataParser',
]
