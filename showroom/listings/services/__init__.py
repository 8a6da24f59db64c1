"""Listing services package."""
from .listing_service import ListingService, sort_images

__all__ = ['ListingService', 'sort_images']
