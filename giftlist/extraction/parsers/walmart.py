"""
Walmart Product Parser

Walmart's price markup changes often, so price selectors run from the
current data-testid wrapper down to a loose [class*="price"] match.
"""

from itertools import chain

from ...common.constants import PARSE_FAILED_TEMPLATE
from ...models import ProductMetadata, Retailer
from .html_parser import HTMLContentParser

NAME_SELECTORS = ['h1[itemprop="name"]', 'h1']

PRICE_TEXT_SELECTORS = ['[data-testid="price-wrap"]']

PRICE_ATTR_SELECTORS = [
    ('[itemprop="price"]', 'content'),
    ('span[itemprop="price"]', 'content'),
]

PRICE_FALLBACK_SELECTORS = [
    'span.price-characteristic',
    '.price-group .price',
    '[class*="price"]',
]

IMAGE_SELECTORS = [
    ('img[data-testid="hero-image"]', 'src'),
    ('img.hover-zoom-hero-image', 'src'),
]


def parse_walmart(html: str, url: str) -> ProductMetadata:
    """Extract product metadata from a Walmart product page."""
    parser = HTMLContentParser(html, url)

    name = parser.first_text(NAME_SELECTORS) or parser.meta_content('og:title')
    price = parser.first_price(chain(
        parser.texts(PRICE_TEXT_SELECTORS),
        parser.attrs(PRICE_ATTR_SELECTORS),
        parser.texts(PRICE_FALLBACK_SELECTORS),
        [parser.meta_content('og:price:amount')],
    ))
    image_url = parser.first_image(chain(
        parser.attrs(IMAGE_SELECTORS),
        [parser.meta_content('og:image')],
    ))

    return ProductMetadata.from_fields(
        retailer=Retailer.WALMART,
        name=name,
        price=price,
        image_url=image_url,
        error=PARSE_FAILED_TEMPLATE.format(retailer=Retailer.WALMART.value),
    )
