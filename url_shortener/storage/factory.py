"""
Factory for creating data provider instances.
"""

from enum import Enum
import inspect
import logging

from .strategies import (
    DataProvider,
    InMemoryDataProvider,
    RedisDataProvider,
    SQLAlchemyDataProvider,
)
from url_shortener.config import settings
from url_shortener.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class DataProviderBackend(Enum):
    """Available data provider backends"""
    MEMORY = "memory"
    REDIS = "redis"
    SQLALCHEMY = "sqlalchemy"


class DataProviderFactory:
    """
    Simple factory for creating data providers.

    Gets connection configuration from settings (not passed as parameters).
    No instance is cached here: whoever builds a UrlShortener owns its
    provider and passes it around explicitly.
    """

    @classmethod
    def create(cls, backend: DataProviderBackend) -> DataProvider:
        """
        Create a data provider.

        Args:
            backend: Type of data provider (from enum)

        Returns:
            New data provider instance
        """
        if backend == DataProviderBackend.MEMORY:
            provider = InMemoryDataProvider()

        elif backend == DataProviderBackend.REDIS:
            import redis

            redis_client = redis.from_url(
                settings.redis_url,
                decode_responses=False,
                socket_connect_timeout=2,
                socket_timeout=2,
            )
            provider = RedisDataProvider(redis_client, ttl=settings.storage_ttl)

        elif backend == DataProviderBackend.SQLALCHEMY:
            provider = SQLAlchemyDataProvider()

        else:
            raise ConfigurationError(f"Unknown data provider backend: {backend}")

        logger.info("Data provider initialized: %s", type(provider).__name__)
        return provider

    @classmethod
    def resolve(cls, selector) -> DataProvider:
        """
        Turn a configured selector into a data provider instance.

        Accepted selectors:
        - a DataProvider instance (used as is)
        - a DataProvider subclass (instantiated without arguments)
        - a DataProviderBackend member or its string value

        Raises:
            ConfigurationError: If the selector is empty or resolves to
                something that does not implement put/get
        """
        if selector is None or selector == "":
            raise ConfigurationError("You must define 'dataProvider' in the shortener config")

        if isinstance(selector, DataProvider):
            return selector

        if inspect.isclass(selector):
            if issubclass(selector, DataProvider) and not inspect.isabstract(selector):
                return selector()
            raise ConfigurationError(
                f"Data provider {selector.__name__} is not a concrete DataProvider"
            )

        try:
            backend = DataProviderBackend(selector)
        except ValueError:
            raise ConfigurationError(f"Unknown data provider: {selector!r}") from None
        return cls.create(backend)
