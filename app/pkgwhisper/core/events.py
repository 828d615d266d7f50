"""In-process event hub for lifecycle notifications."""

import logging
from collections.abc import Callable

from pkgwhisper.models.events import InstallerEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[InstallerEvent], None]


class EventHub:
    """Multicasts published events to subscribed handlers in publish order.

    Handlers are expected to be fast and non-blocking; there is no
    queueing or backpressure.

    Example:
        >>> hub = EventHub()
        >>> hub.subscribe(print)
        >>> hub.publish(InitializationEvent(package_id="vlc"))
        InitializationEvent(package_id='vlc')
    """

    def __init__(self) -> None:
        self._handlers: list[EventHandler] = []

    def subscribe(self, handler: EventHandler) -> None:
        """Register a handler for all events."""
        self._handlers.append(handler)

    def publish(self, event: InstallerEvent) -> None:
        """Deliver an event to every subscribed handler."""
        logger.debug("Publishing %s", event)
        for handler in self._handlers:
            handler(event)
