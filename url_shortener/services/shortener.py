import logging
import re
from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from url_shortener.config import ShortenerConfig
from url_shortener.events import (
    EVENT_AFTER_EXPAND,
    EVENT_AFTER_SHORTEN,
    EVENT_BEFORE_EXPAND,
    EVENT_BEFORE_SHORTEN,
    EVENT_EXPAND_FAIL,
    EVENT_SHORTEN_FAIL,
    EventDispatcher,
    Listener,
    ShortenerEvent,
)
from url_shortener.exceptions import ConfigurationError, DuplicateKeyError
from url_shortener.services.hash_factory import HashGeneratorFactory
from url_shortener.services.hash_strategies import HashGenerator
from url_shortener.storage.factory import DataProviderFactory
from url_shortener.storage.strategies import DataProvider


logger = logging.getLogger(__name__)

# Last path segment made of word characters, e.g. "/l/UddskE" -> "UddskE"
ALIAS_IN_PATH = re.compile(r"(?:\w(?!/))+$", re.ASCII)


class UrlShortener:
    """
    Shortens long URLs into hash aliases and expands them back.

    The shortener owns no mappings: every alias lives in the injected data
    provider, and uniqueness is enforced by that provider's put(). What the
    shortener adds is alias generation, collision retry, short URL
    composition and lifecycle events.

    Example:
        shortener = UrlShortener({"dataProvider": "memory", "baseUrl": "https://s.test"})
        short_url = shortener.shorten("http://example.com/page")
        shortener.expand_by_path(short_url)  # "http://example.com/page"

    Events (see url_shortener.events):
        before.shorten {long_url}      after.shorten {long_url, short_url}
        shorten.fail {alias}           before.expand {alias} or {path}
        after.expand {alias, long_url} expand.fail {alias} or {path}
    """

    def __init__(
        self,
        config: Union[ShortenerConfig, Mapping[str, Any]],
        app_base_url: Optional[str] = None,
        events: Optional[EventDispatcher] = None,
        listeners: Optional[Iterable[Tuple[str, Listener]]] = None,
    ):
        """
        Initialize the shortener.

        Args:
            config: ShortenerConfig or a mapping of its options
            app_base_url: Application-wide base URL, used when the config
                          has no base_url of its own
            events: Dispatcher to emit events on (a new one by default)
            listeners: (event_name, listener) pairs registered in order

        Raises:
            ConfigurationError: If the options are invalid or the data
                provider / hash generator cannot be resolved
        """
        if not isinstance(config, ShortenerConfig):
            try:
                config = ShortenerConfig.model_validate(dict(config or {}))
            except ValidationError as exc:
                raise ConfigurationError(f"Invalid shortener config: {exc}") from exc

        self._config = config
        self._app_base_url = app_base_url
        self._events = events if events is not None else EventDispatcher()
        self._data_provider = DataProviderFactory.resolve(config.data_provider)
        self._hash_generator = HashGeneratorFactory.create(
            config.hash_generator, length=config.url_length
        )

        for event_name, listener in listeners or ():
            self._events.on(event_name, listener)

    @property
    def config(self) -> ShortenerConfig:
        return self._config

    @property
    def data_provider(self) -> DataProvider:
        return self._data_provider

    @property
    def hash_generator(self) -> HashGenerator:
        return self._hash_generator

    @property
    def events(self) -> EventDispatcher:
        return self._events

    def set_data_provider(self, data_provider) -> "UrlShortener":
        """Replace the data provider (same selectors as the config accepts)"""
        self._data_provider = DataProviderFactory.resolve(data_provider)
        return self

    def set_hash_generator(self, hash_generator) -> "UrlShortener":
        """Replace the alias generator with a strategy or a `(long_url) -> str` callable"""
        self._hash_generator = HashGeneratorFactory.create(
            hash_generator, length=self._config.url_length
        )
        return self

    def on(self, event_name: str, listener: Listener) -> Listener:
        return self._events.on(event_name, listener)

    def off(self, event_name: str, listener: Optional[Listener] = None) -> None:
        self._events.off(event_name, listener)

    def shorten(self, long_url: str, alias: Optional[str] = None) -> str:
        """
        Store a long URL under a new alias and return the short URL.

        Args:
            long_url: URL to shorten, stored as is
            alias: Use this alias verbatim instead of generating one

        Returns:
            base_url[/short_url_path]/alias

        Raises:
            ConfigurationError: If no base URL can be resolved
                or the hash generator returns an empty alias
            DuplicateKeyError: If the alias is taken (explicit alias, retry
                disabled, or retries exhausted)
        """
        self._trigger(EVENT_BEFORE_SHORTEN, long_url=long_url)
        base_url = self._get_base_url()

        retries = 0
        while True:
            candidate = alias if alias is not None else self._generate_alias(long_url)
            try:
                self._data_provider.put(candidate, long_url)
                break
            except DuplicateKeyError:
                if alias is None and self._can_retry(retries):
                    retries += 1
                    logger.debug("Alias %s already taken, retry %d", candidate, retries)
                    continue

                self._trigger(EVENT_SHORTEN_FAIL, alias=candidate)
                raise

        short_url = base_url
        if self._config.short_url_path is not None:
            short_url += "/" + self._config.short_url_path
        short_url += "/" + candidate

        self._trigger(EVENT_AFTER_SHORTEN, long_url=long_url, short_url=short_url)
        return short_url

    def expand_by_alias(self, alias: str) -> Optional[str]:
        """Return the long URL stored under `alias`, or None"""
        self._trigger(EVENT_BEFORE_EXPAND, alias=alias)
        return self._expand(alias)

    def expand_by_path(self, path: str) -> Optional[str]:
        """
        Resolve a request path (or a full short URL) to its long URL.

        The alias is the trailing run of word characters, so "/l/UddskE"
        and "https://s.test/l/UddskE" both look up "UddskE". A path ending
        in "/" has no alias and returns None without touching storage.
        """
        self._trigger(EVENT_BEFORE_EXPAND, path=path)
        match = ALIAS_IN_PATH.search(path)
        if match is None:
            self._trigger(EVENT_EXPAND_FAIL, path=path)
            return None

        return self.expand_by_alias(match.group(0))

    def _expand(self, alias: str) -> Optional[str]:
        long_url = self._data_provider.get(alias)
        if long_url is None:
            self._trigger(EVENT_EXPAND_FAIL, alias=alias)
            return None

        self._trigger(EVENT_AFTER_EXPAND, alias=alias, long_url=long_url)
        return long_url

    def _can_retry(self, retries: int) -> bool:
        if not self._config.retry_on_duplicate:
            return False
        max_retries = self._config.max_retries
        return max_retries is None or retries < max_retries

    def _generate_alias(self, long_url: str) -> str:
        alias = self._hash_generator.generate(long_url)[: self._config.url_length]
        if not alias:
            raise ConfigurationError(
                f"Hash generator {type(self._hash_generator).__name__} returned an empty alias"
            )
        return alias

    def _get_base_url(self) -> str:
        """
        Configured base_url, falling back to the application base URL.
        One trailing slash is removed.
        """
        base_url = self._config.base_url or self._app_base_url
        if not base_url:
            raise ConfigurationError(
                "You must define 'baseUrl' in the shortener config or the application base URL"
            )
        return re.sub(r"/$", "", base_url)

    def _trigger(self, event_name: str, **data) -> None:
        self._events.dispatch(ShortenerEvent(name=event_name, subject=self, data=data))
