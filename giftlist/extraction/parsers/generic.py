"""
Generic Product Parser

Fallback for retailers without a dedicated parser (Etsy, eBay, unknown
shops). Relies on Open Graph and other meta tags, then on JSON-LD.
"""

from itertools import chain

from ...common.constants import NO_METADATA_FOUND
from ...common.text_utils import clean_text
from ...models import ProductMetadata
from ..url_utils import detect_retailer
from .html_parser import HTMLContentParser
from .structured_data import StructuredDataParser


def parse_generic(html: str, url: str) -> ProductMetadata:
    """
    Extract product metadata from meta tags.

    Args:
        html: Page HTML
        url: Normalized page URL (also used to name the retailer)

    Returns:
        ProductMetadata for the detected retailer
    """
    parser = HTMLContentParser(html, url)
    structured = StructuredDataParser()
    products = structured.parse(parser.soup)

    name = (
        parser.meta_content('og:title', 'title')
        or parser.page_title()
        or parser.first_text(['h1'])
        or next(filter(None, map(structured.extract_name, products)), "")
    )

    price = parser.first_price(chain(
        [parser.meta_content('og:price:amount', 'product:price:amount')],
        map(structured.extract_price, products),
    ))

    image_url = parser.first_image(chain(
        [parser.meta_content('og:image', 'twitter:image', 'image')],
        map(structured.extract_image, products),
    ))

    return ProductMetadata.from_fields(
        retailer=detect_retailer(url),
        name=clean_text(name),
        price=price,
        image_url=image_url,
        error=NO_METADATA_FOUND,
    )
