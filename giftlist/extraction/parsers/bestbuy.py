"""
Best Buy Product Parser
"""

from itertools import chain

from ...common.constants import PARSE_FAILED_TEMPLATE
from ...models import ProductMetadata, Retailer
from .html_parser import HTMLContentParser

NAME_SELECTORS = ['h1.heading-5', 'div.sku-title h1', 'h1']

PRICE_SELECTORS = [
    'div.priceView-customer-price span',
    '.priceView-hero-price span',
]

IMAGE_SELECTORS = [
    ('img.primary-image', 'src'),
    ('.shop-media img', 'src'),
]


def parse_bestbuy(html: str, url: str) -> ProductMetadata:
    """Extract product metadata from a Best Buy product page."""
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
        retailer=Retailer.BEST_BUY,
        name=name,
        price=price,
        image_url=image_url,
        error=PARSE_FAILED_TEMPLATE.format(retailer=Retailer.BEST_BUY.value),
    )
