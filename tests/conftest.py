"""
Test configuration and fixtures for the URL shortener.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import create_app
from url_shortener.exceptions import DuplicateKeyError
from url_shortener.services.shortener import UrlShortener
from url_shortener.storage.strategies import InMemoryDataProvider, SQLAlchemyDataProvider

BASE_URL = "https://s.test"


class EventRecorder:
    """Listener that remembers every event it receives, in order"""

    def __init__(self):
        self.events = []

    def __call__(self, event):
        self.events.append(event)

    @property
    def names(self):
        return [event.name for event in self.events]

    def named(self, name):
        return [event for event in self.events if event.name == name]


class FlakyDataProvider(InMemoryDataProvider):
    """
    In-memory provider that rejects the first `failures` puts as duplicates.
    Counts every call to put() and get().
    """

    def __init__(self, failures: int = 0):
        super().__init__()
        self.failures = failures
        self.put_calls = []
        self.get_calls = []

    def put(self, alias, long_url):
        self.put_calls.append(alias)
        if len(self.put_calls) <= self.failures:
            raise DuplicateKeyError(alias)
        super().put(alias, long_url)

    def get(self, alias):
        self.get_calls.append(alias)
        return super().get(alias)


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def data_provider():
    return FlakyDataProvider()


@pytest.fixture
def shortener(data_provider, recorder):
    """Shortener on a fresh in-memory provider with a '*' event recorder"""
    instance = UrlShortener({"dataProvider": data_provider, "baseUrl": BASE_URL})
    instance.on("*", recorder)
    return instance


@pytest.fixture(scope="function")
def sqlalchemy_provider():
    """
    SQLAlchemy provider on a private in-memory SQLite database.
    StaticPool keeps the single connection alive so the table survives.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    try:
        yield SQLAlchemyDataProvider(session_factory)
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def client():
    """
    Test client around an app serving a fresh in-memory shortener
    mounted under the /l prefix.
    """
    instance = UrlShortener({
        "dataProvider": InMemoryDataProvider(),
        "baseUrl": BASE_URL,
        "shortUrlPath": "l",
    })
    app = create_app(shortener=instance)

    with TestClient(app) as test_client:
        yield test_client
