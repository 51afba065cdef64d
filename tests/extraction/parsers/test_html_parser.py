"""Tests for giftlist/extraction/parsers/html_parser.py"""

import pytest

from giftlist.extraction.parsers.html_parser import HTMLContentParser

PAGE_URL = "https://shop.example.com/p/lamp"


def make_parser(html: str) -> HTMLContentParser:
    return HTMLContentParser(html, PAGE_URL)


class TestFirstText:
    def test_priority_order(self):
        parser = make_parser('<h1>Heading</h1><h1 itemprop="name">Named</h1>')
        assert parser.first_text(['h1[itemprop="name"]', 'h1']) == "Named"

    def test_skips_empty_match(self):
        parser = make_parser('<span id="productTitle">   </span><h1>Fallback</h1>')
        assert parser.first_text(['#productTitle', 'h1']) == "Fallback"

    def test_whitespace_cleaned(self):
        parser = make_parser("<h1>  Spaced \n  Title  </h1>")
        assert parser.first_text(['h1']) == "Spaced Title"

    def test_no_match_returns_empty(self):
        assert make_parser("<p>nothing</p>").first_text(['h1', '#title']) == ""


class TestAttrs:
    def test_yields_in_order(self):
        parser = make_parser('<img id="a" src="a.jpg"><img id="b" src="b.jpg">')
        assert list(parser.attrs([('#b', 'src'), ('#a', 'src')])) == ["b.jpg", "a.jpg"]

    def test_skips_missing_attribute(self):
        parser = make_parser('<img id="a"><img id="b" src="b.jpg">')
        assert parser.first_attr([('#a', 'src'), ('#b', 'src')]) == "b.jpg"

    def test_no_match(self):
        assert make_parser("<p></p>").first_attr([('img', 'src')]) == ""


class TestMetaContent:
    def test_property(self):
        parser = make_parser('<meta property="og:title" content="OG Title">')
        assert parser.meta_content('og:title') == "OG Title"

    def test_name_attribute(self):
        parser = make_parser('<meta name="twitter:image" content="https://x.com/a.png">')
        assert parser.meta_content('og:image', 'twitter:image') == "https://x.com/a.png"

    def test_first_key_wins(self):
        parser = make_parser(
            '<meta name="title" content="Meta"><meta property="og:title" content="OG">'
        )
        assert parser.meta_content('og:title', 'title') == "OG"

    def test_empty_content_skipped(self):
        parser = make_parser('<meta property="og:title" content="  ">')
        assert parser.meta_content('og:title') == ""


class TestPageTitle:
    def test_title(self):
        assert make_parser("<title> Lamp |  Shop </title>").page_title() == "Lamp | Shop"

    def test_missing(self):
        assert make_parser("<p></p>").page_title() == ""


class TestFirstPrice:
    def test_first_parseable_wins(self):
        parser = make_parser("")
        assert parser.first_price(["", "See price in cart", "$12.50", "$9.00"]) == pytest.approx(12.5)

    def test_none_parseable(self):
        assert make_parser("").first_price(["Free", ""]) is None


class TestFirstImage:
    def test_resolves_relative(self):
        parser = make_parser("")
        assert parser.first_image(["/img/lamp.jpg"]) == "https://shop.example.com/img/lamp.jpg"

    def test_skips_invalid_candidates(self):
        parser = make_parser("")
        candidates = ["https://shop.example.com/page.html", "", "https://cdn.example.com/lamp.webp"]
        assert parser.first_image(candidates) == "https://cdn.example.com/lamp.webp"

    def test_none_valid(self):
        assert make_parser("").first_image(["https://shop.example.com/product"]) is None
