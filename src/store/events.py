"""Typed store events and a per-store publish/subscribe emitter.

Each store owns one emitter, so subscribers name the store they listen
to explicitly instead of sharing a process-wide event namespace.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

from core.errors import PeopleListEventError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class StoreEvent:
    """Base class for all store notifications."""


@dataclass(frozen=True)
class RecordsChanged(StoreEvent):
    """Emitted after an upsert alters record membership or contents."""

    added: tuple[str, ...] = ()
    updated: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()


@dataclass(frozen=True)
class FilterRuleAdded(StoreEvent):
    """Emitted after an upsert inserts one or more new filter rules."""

    rule_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class FilterRulesChanged(StoreEvent):
    """Emitted after an upsert updates or removes rules without adding any."""

    updated: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()


@dataclass(frozen=True)
class FilterToggled(StoreEvent):
    """Emitted after a filter rule's enabled flag flips."""

    rule_id: str
    enabled: bool


EventT = TypeVar("EventT", bound=StoreEvent)
EventHandler = Callable[[EventT], None]
Unsubscribe = Callable[[], None]


class EventEmitter:
    """Synchronous event dispatcher keyed by event type."""

    def __init__(self) -> None:
        self._handlers: dict[type[StoreEvent], list[Callable[..., None]]] = {}

    def subscribe(self, event_type: type[EventT], handler: EventHandler[EventT]) -> Unsubscribe:
        """Register a handler for one event type.

        Args:
            event_type: Concrete event class to listen for.
            handler: Callable invoked with each emitted event.

        Returns:
            Callable that removes the subscription when invoked.
        """
        handlers = self._handlers.setdefault(event_type, [])
        handlers.append(handler)

        def unsubscribe() -> None:
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def emit(self, event: StoreEvent) -> None:
        """Deliver an event to every handler in subscription order.

        Args:
            event: Event instance to deliver.

        Raises:
            PeopleListEventError: If a handler raises.
        """
        handlers = tuple(self._handlers.get(type(event), ()))
        _LOGGER.debug("store_event_emitted", event_type=type(event).__name__, handlers=len(handlers))
        for handler in handlers:
            _invoke_handler(handler, event)

    def handler_count(self, event_type: type[StoreEvent]) -> int:
        """Return the number of handlers subscribed to an event type."""
        return len(self._handlers.get(event_type, ()))


def _invoke_handler(handler: Callable[..., None], event: StoreEvent) -> None:
    """Invoke one handler and wrap failures with context."""
    try:
        handler(event)
    except Exception as error:
        handler_name = getattr(handler, "__qualname__", repr(handler))
        raise PeopleListEventError(
            f"Handler '{handler_name}' failed on {type(event).__name__}: {error}. "
            "Fix the subscriber or unsubscribe it before mutating the store."
        ) from error
