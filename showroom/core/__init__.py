"""Showroom Core Platform Module.

Shared infrastructure used by all resource sections:
- Repository base class and error taxonomy
- Admin authentication (credential store, session tokens)
- Upload handling
- Logging and API helpers
"""
