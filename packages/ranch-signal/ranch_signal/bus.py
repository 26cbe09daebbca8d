"""Queued pub/sub bus for ranch notifications.

Signals published during a tick wait in the queue and are delivered
together when the bus is flushed, after every system has run. Handlers
see the pets in their end-of-tick state, and anything they publish is
held for the following flush.
"""
from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

Handler = Callable[[str, dict[str, Any]], None]

S = TypeVar("S")


class SignalBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    # -- Subscribing --

    def subscribe(self, signal_name: str, handler: Handler) -> Handler:
        self._subscribers.setdefault(signal_name, []).append(handler)
        return handler

    def on(self, signal_type: type[S], handler: Callable[[S], None]) -> Handler:
        """Subscribe with a handler that takes the typed record.

        Returns the wrapping handler, which is what ``unsubscribe`` needs.
        """

        def deliver(signal_name: str, data: dict[str, Any]) -> None:
            handler(signal_type(**data))

        return self.subscribe(signal_type.signal, deliver)  # type: ignore[attr-defined]

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if not handlers:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    # -- Publishing --

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def emit(self, record: Any) -> None:
        """Queue a typed signal record (see ``ranch_signal.signals``)."""
        data = {f.name: getattr(record, f.name) for f in fields(record)}
        self.publish(record.signal, **data)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Deliver queued signals in publish order and return how many."""
        batch, self._queue = self._queue, []
        for signal_name, data in batch:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
        if batch:
            logger.debug("delivered %d signal(s)", len(batch))
        return len(batch)

    def clear(self) -> None:
        self._queue.clear()
