"""Tests for parser dispatch in giftlist/extraction/parsers/__init__.py"""

import pytest

from giftlist.extraction.parsers import (
    PARSERS,
    get_parser,
    parse_amazon,
    parse_bestbuy,
    parse_generic,
    parse_target,
    parse_walmart,
)
from giftlist.models import Retailer


class TestGetParser:
    @pytest.mark.parametrize("retailer, parser", [
        (Retailer.AMAZON, parse_amazon),
        (Retailer.TARGET, parse_target),
        (Retailer.WALMART, parse_walmart),
        (Retailer.BEST_BUY, parse_bestbuy),
    ])
    def test_dedicated_parsers(self, retailer, parser):
        assert get_parser(retailer) is parser

    @pytest.mark.parametrize("retailer", [Retailer.ETSY, Retailer.EBAY, Retailer.UNKNOWN])
    def test_generic_fallback(self, retailer):
        assert get_parser(retailer) is parse_generic

    def test_table_covers_only_dedicated_retailers(self):
        assert set(PARSERS) == {Retailer.AMAZON, Retailer.TARGET, Retailer.WALMART, Retailer.BEST_BUY}
