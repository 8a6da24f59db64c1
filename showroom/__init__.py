"""Showroom: backend for a small motorcycle dealership website."""

__version__ = '1.0.0'
