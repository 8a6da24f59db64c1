"""Testimonial repositories package."""
from .testimonial_repository import TestimonialRepository

__all__ = ['TestimonialRepository']
