"""
Tests for settings and the shortener config model.
"""
import pytest
from pydantic import ValidationError

from url_shortener.config import Settings, ShortenerConfig
from url_shortener.dependencies import build_shortener
from url_shortener.services.hash_strategies import RandomHashGenerator
from url_shortener.storage.strategies import InMemoryDataProvider


class TestShortenerConfig:

    def test_camel_case_and_snake_case(self):
        camel = ShortenerConfig(dataProvider="memory", urlLength=8, baseUrl="https://s.test")
        snake = ShortenerConfig(data_provider="memory", url_length=8, base_url="https://s.test")

        assert camel == snake

    def test_short_url_path_slashes_stripped(self):
        assert ShortenerConfig(dataProvider="memory", shortUrlPath="/l/").short_url_path == "l"
        assert ShortenerConfig(dataProvider="memory", shortUrlPath="/").short_url_path is None

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            ShortenerConfig(dataProvider="memory", expireAfter=10)


class TestSettings:

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("URL_LENGTH", "8")
        monkeypatch.setenv("RETRY_ON_DUPLICATE", "true")
        monkeypatch.setenv("SHORT_URL_PATH", "go")
        monkeypatch.setenv("HASH_GENERATOR", "random")

        config = Settings(_env_file=None).shortener_config()

        assert config.url_length == 8
        assert config.retry_on_duplicate is True
        assert config.short_url_path == "go"
        assert config.hash_generator == "random"
        assert config.data_provider == "memory"

    def test_build_shortener(self):
        app_settings = Settings(
            _env_file=None,
            hash_generator="random",
            base_url=None,
            app_full_base_url="https://app.test",
        )

        shortener = build_shortener(app_settings)

        assert isinstance(shortener.data_provider, InMemoryDataProvider)
        assert isinstance(shortener.hash_generator, RandomHashGenerator)
        assert shortener.shorten("x", "abc") == "https://app.test/abc"

    def test_build_shortener_overrides(self):
        shortener = build_shortener(Settings(_env_file=None), base_url="https://s.test", url_length=4)

        assert shortener.config.url_length == 4
        assert len(shortener.shorten("x").rsplit("/", 1)[-1]) == 4

    def test_unbounded_retries_from_environment(self, monkeypatch):
        """Test MAX_RETRIES=null switches the retry cap off"""
        monkeypatch.setenv("MAX_RETRIES", "null")

        app_settings = Settings(_env_file=None)

        assert app_settings.max_retries is None
        assert app_settings.shortener_config().max_retries is None
