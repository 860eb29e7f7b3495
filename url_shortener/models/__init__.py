"""
Database models for the URL shortener.

Only the relational data provider uses these; the core never touches them.
"""

from .url import ShortUrl

__all__ = ["ShortUrl"]
