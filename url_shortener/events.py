"""
Lifecycle events emitted by the URL shortener.

Listeners are plain callables that receive a ShortenerEvent. They are
invoked synchronously, in the order they were registered, and any
exception they raise propagates to whoever triggered the event.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


logger = logging.getLogger(__name__)


EVENT_BEFORE_EXPAND = "url.shortener.event.before.expand"
EVENT_AFTER_EXPAND = "url.shortener.event.after.expand"
EVENT_EXPAND_FAIL = "url.shortener.event.expand.fail"
EVENT_BEFORE_SHORTEN = "url.shortener.event.before.shorten"
EVENT_AFTER_SHORTEN = "url.shortener.event.after.shorten"
EVENT_SHORTEN_FAIL = "url.shortener.event.shorten.fail"

# Subscribing to this name receives every event
ALL_EVENTS = "*"


class ShortenerEvent(BaseModel):
    """
    Event passed to listeners.

    `subject` is the object that emitted the event (the UrlShortener),
    `data` holds the payload, e.g. {"alias": "AbCdEf", "long_url": "..."}.
    """

    name: str = Field(..., description="Event name, one of the EVENT_* constants")
    subject: Any = Field(None, description="Object that triggered the event")
    data: Dict[str, Any] = Field(default_factory=dict, description="Event payload")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event was triggered",
    )

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)


Listener = Callable[[ShortenerEvent], Any]


class EventDispatcher:
    """
    Minimal synchronous pub/sub.

    Registrations are kept in a single ordered list so that listeners for a
    specific name and wildcard listeners fire in the order they were added.
    Return values of listeners are ignored.
    """

    def __init__(self):
        self._listeners: List[Tuple[str, Listener]] = []

    def on(self, event_name: str, listener: Listener) -> Listener:
        """Register a listener; returns it so this can be used as a decorator helper"""
        if not callable(listener):
            raise TypeError(f"Listener for '{event_name}' must be callable")
        self._listeners.append((event_name, listener))
        return listener

    def off(self, event_name: str, listener: Optional[Listener] = None) -> None:
        """Remove one listener, or every listener of the event when none is given"""
        self._listeners = [
            (name, registered)
            for name, registered in self._listeners
            if not (name == event_name and (listener is None or registered == listener))
        ]

    def listeners(self, event_name: str) -> List[Listener]:
        return [
            registered
            for name, registered in self._listeners
            if name == event_name or name == ALL_EVENTS
        ]

    def dispatch(self, event: ShortenerEvent) -> ShortenerEvent:
        for listener in self.listeners(event.name):
            listener(event)
        return event

    def __len__(self) -> int:
        return len(self._listeners)


def log_event(event: ShortenerEvent) -> None:
    """Listener that writes every event to the log (registered by the web app)"""
    logger.debug("%s %s", event.name, event.data)
