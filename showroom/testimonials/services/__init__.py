"""Testimonial services package."""
from .testimonial_service import TestimonialService, DEFAULT_COLOR

__all__ = ['TestimonialService', 'DEFAULT_COLOR']
