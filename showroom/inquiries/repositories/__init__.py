"""Inquiry repositories package."""
from .inquiry_repository import InquiryRepository

__all__ = ['InquiryRepository']
