"""
Product metadata models.

Pure data classes describing the result of a product page lookup.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Retailer(str, Enum):
    """Known retailers plus the Unknown catch-all."""
    AMAZON = "Amazon"
    TARGET = "Target"
    WALMART = "Walmart"
    BEST_BUY = "Best Buy"
    ETSY = "Etsy"
    EBAY = "eBay"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ProductMetadata:
    """
    Normalized result of a single metadata fetch.

    A failed lookup carries an error reason and no product data; any
    recovered name, price or image makes the result a success.
    """
    name: Optional[str]
    price: Optional[float]
    image_url: Optional[str]
    retailer: str
    success: bool
    error: Optional[str] = None

    def __post_init__(self):
        """Validate the success/error invariant."""
        if self.price is not None and self.price < 0:
            raise ValueError(f"Price must not be negative: {self.price}")
        if not self.success:
            if not self.error:
                raise ValueError("Failed metadata requires an error reason")
            if self.has_data:
                raise ValueError("Metadata with product data cannot be a failure")

    @property
    def has_data(self) -> bool:
        return bool(self.name or self.price or self.image_url)

    @classmethod
    def failure(cls, error: str, retailer: str = Retailer.UNKNOWN.value) -> "ProductMetadata":
        """Create an error result with no product data."""
        return cls(
            name=None,
            price=None,
            image_url=None,
            retailer=_retailer_name(retailer),
            success=False,
            error=error,
        )

    @classmethod
    def from_fields(
        cls,
        retailer: str,
        name: Optional[str],
        price: Optional[float],
        image_url: Optional[str],
        error: str,
    ) -> "ProductMetadata":
        """
        Compose a parser result.

        Args:
            retailer: Retailer name for the result
            name: Extracted product name (empty string counts as absent)
            price: Extracted positive price
            image_url: Validated image URL
            error: Reason reported when nothing was extracted
        """
        name = name or None
        image_url = image_url or None
        success = bool(name or price or image_url)
        return cls(
            name=name,
            price=price,
            image_url=image_url,
            retailer=_retailer_name(retailer),
            success=success,
            error=None if success else error,
        )

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation."""
        return asdict(self)


def _retailer_name(retailer) -> str:
    return retailer.value if isinstance(retailer, Retailer) else str(retailer)
