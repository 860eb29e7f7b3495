"""
Data provider module: where alias -> long URL mappings are stored.

This module implements the Strategy Pattern for pluggable storage.
"""

from .strategies import (
    DataProvider,
    InMemoryDataProvider,
    RedisDataProvider,
    SQLAlchemyDataProvider,
)
from .factory import DataProviderFactory, DataProviderBackend

__all__ = [
    "DataProvider",
    "InMemoryDataProvider",
    "RedisDataProvider",
    "SQLAlchemyDataProvider",
    "DataProviderFactory",
    "DataProviderBackend",
]
