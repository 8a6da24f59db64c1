"""Listing repositories package."""
from .listing_repository import ListingRepository
from .image_repository import ImageRepository

__all__ = ['ListingRepository', 'ImageRepository']
