"""
Data provider strategies using Strategy Pattern.

A data provider is where alias -> long URL mappings live. The shortener
core only ever calls put() and get(), so any key-value store that can
reject a duplicate key atomically can back it:
- In-memory: tests and single-process development
- Redis: shared store, optional TTL on every key
- SQLAlchemy: relational database (SQLite, PostgreSQL, ...)
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional
import threading

from sqlalchemy.exc import IntegrityError

from url_shortener.database.connection import Base, SessionLocal
from url_shortener.exceptions import DuplicateKeyError
from url_shortener.models.url import ShortUrl


class DataProvider(ABC):
    """
    Abstract base class for data providers.

    Contract:
    - put() must be atomic with respect to the uniqueness check, two
      concurrent puts of the same alias must not both succeed
    - get() returns None for missing (or backend-side expired) aliases
    """

    @abstractmethod
    def put(self, alias: str, long_url: str) -> None:
        """
        Store a new mapping.

        Args:
            alias: Short alias, the unique key
            long_url: URL the alias points to

        Raises:
            DuplicateKeyError: If the alias is already stored
        """
        pass

    @abstractmethod
    def get(self, alias: str) -> Optional[str]:
        """
        Look up a mapping.

        Args:
            alias: Short alias

        Returns:
            The long URL, or None if missing or expired
        """
        pass


class InMemoryDataProvider(DataProvider):
    """
    Dict-backed provider guarded by a lock.

    Pros:
    - No external services
    - Good for development and testing

    Cons:
    - Lost on restart
    - Not shared between processes
    """

    def __init__(self):
        self._storage: Dict[str, str] = {}
        self._lock = threading.Lock()

    def put(self, alias: str, long_url: str) -> None:
        with self._lock:
            if alias in self._storage:
                raise DuplicateKeyError(alias)
            self._storage[alias] = long_url

    def get(self, alias: str) -> Optional[str]:
        return self._storage.get(alias)


class RedisDataProvider(DataProvider):
    """
    Redis implementation.

    Uses SET with NX so the uniqueness check and the write are a single
    atomic command on the server. If a TTL is configured keys expire on
    their own and get() simply stops finding them.
    """

    def __init__(self, redis_client, key_prefix: str = "url:", ttl: Optional[int] = None):
        """
        Initialize Redis data provider.

        Args:
            redis_client: Redis client instance (redis.Redis)
            key_prefix: Prefix of every stored key
            ttl: Expiry in seconds, None keeps keys forever
        """
        self.redis = redis_client
        self.key_prefix = key_prefix
        self.ttl = ttl

    def _key(self, alias: str) -> str:
        return f"{self.key_prefix}{alias}"

    def put(self, alias: str, long_url: str) -> None:
        stored = self.redis.set(self._key(alias), long_url, nx=True, ex=self.ttl)
        if not stored:
            raise DuplicateKeyError(alias)

    def get(self, alias: str) -> Optional[str]:
        value = self.redis.get(self._key(alias))
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else value


class SQLAlchemyDataProvider(DataProvider):
    """
    Relational implementation on top of the ShortUrl model.

    The alias column is the primary key; a colliding insert fails with
    IntegrityError, which is translated into DuplicateKeyError.
    """

    def __init__(self, session_factory=SessionLocal, create_tables: bool = True):
        """
        Args:
            session_factory: sessionmaker producing sessions bound to an engine
            create_tables: Create the short_urls table if it does not exist
        """
        self.session_factory = session_factory
        bind = getattr(session_factory, "kw", {}).get("bind")
        if create_tables and bind is not None:
            Base.metadata.create_all(bind=bind)

    def put(self, alias: str, long_url: str) -> None:
        with self.session_factory() as session:
            session.add(ShortUrl(alias=alias, long_url=long_url))
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise DuplicateKeyError(alias) from exc

    def get(self, alias: str) -> Optional[str]:
        with self.session_factory() as session:
            row = session.get(ShortUrl, alias)
            return row.long_url if row is not None else None
