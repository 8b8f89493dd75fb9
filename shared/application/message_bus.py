"""
Message Bus

Routes committed domain events to the handlers registered for them.
Handlers are registered by each app in its AppConfig.ready().
"""

from typing import Callable, Dict, List, Type
import logging

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class MessageBus:
    """
    Event bus: any number of handlers per event type
    """

    def __init__(self):
        self._event_handlers: Dict[Type[DomainEvent], List[Callable]] = {}

    def register_event_handler(
        self,
        event_type: Type[DomainEvent],
        handler: Callable[[DomainEvent], None]
    ):
        """
        Register a handler for an event type

        Registering the same handler twice is a no-op, so repeated
        AppConfig.ready() calls do not double-send notifications.
        """
        handlers = self._event_handlers.setdefault(event_type, [])
        if handler in handlers:
            return
        handlers.append(handler)
        logger.debug("Registered event handler %s for %s", handler.__name__, event_type.__name__)

    def handlers_for(self, event_type: Type[DomainEvent]) -> List[Callable]:
        return list(self._event_handlers.get(event_type, []))

    def publish_events(self, events: List[DomainEvent]):
        """
        Call every registered handler for each event

        A failing handler is logged and does not stop the others.
        """
        for event in events:
            event_type = type(event)
            handlers = self._event_handlers.get(event_type, [])

            if not handlers:
                logger.warning("No handlers registered for event %s", event_type.__name__)
                continue

            logger.info("Publishing event: %s (ID: %s)", event_type.__name__, event.event_id)

            for handler in handlers:
                try:
                    handler(event)
                    logger.debug("Event %s handled by %s", event_type.__name__, handler.__name__)
                except Exception as e:
                    logger.error(
                        "Error in event handler %s for event %s: %s",
                        handler.__name__, event_type.__name__, e,
                        exc_info=True,
                    )


# Global message bus instance
message_bus = MessageBus()
