"""
Data models for product previews.

This module contains pure data classes with no business logic.
"""

from .item import WishlistItem
from .metadata import ProductMetadata, Retailer

__all__ = ['ProductMetadata', 'Retailer', 'WishlistItem']
