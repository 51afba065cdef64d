"""
Target Product Parser

Target marks product fields with data-test attributes.
"""

from itertools import chain

from ...common.constants import PARSE_FAILED_TEMPLATE
from ...models import ProductMetadata, Retailer
from .html_parser import HTMLContentParser

NAME_SELECTORS = ['h1[data-test="product-title"]', 'h1']

PRICE_SELECTORS = [
    'div[data-test="product-price"]',
    'span[data-test="product-price"]',
    '[data-test="product-price"]',
]

IMAGE_SELECTORS = [
    ('img[data-test="product-image"]', 'src'),
    ('picture img', 'src'),
]


def parse_target(html: str, url: str) -> ProductMetadata:
    """Extract product metadata from a Target product page."""
    parser = HTMLContentParser(html, url)

    name = parser.first_text(NAME_SELECTORS) or parser.meta_content('og:title')
    price = parser.first_price(chain(
        parser.texts(PRICE_SELECTORS),
        [parser.meta_content('og:price:amount')],
    ))
    image_url = parser.first_image(chain(
        parser.attrs(IMAGE_SELECTORS),
        [parser.meta_content('og:image')],
    ))

    return ProductMetadata.from_fields(
        retailer=Retailer.TARGET,
        name=name,
        price=price,
        image_url=image_url,
        error=PARSE_FAILED_TEMPLATE.format(retailer=Retailer.TARGET.value),
    )
