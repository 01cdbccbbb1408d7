"""Event bus carrying a run's progress from the engine to its listeners.

The engine emits ``RunStarted``, ``ClassesHarvested``, one
``ElementCleaned`` per element that lost a class, one ``DocumentCleaned``
(or a failure event) per document, and finally ``RunCompleted``. The CLI
reporter and ``logging_listener`` are the stock listeners.
"""

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Synchronous publish-subscribe bus for run events.

    Document outcomes are reported from the thread that folds results into
    the run stats, in input order, so listeners never run concurrently and
    need no locking of their own.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> None:
        """Call *callback* for every event of exactly *event_type*."""
        self._listeners.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: type, callback: Listener) -> None:
        """Stop delivering *event_type* to *callback*; unknown pairs are ignored."""
        callbacks = self._listeners.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def on_all(self, callback: Listener) -> None:
        """Call *callback* for every event, before the typed listeners."""
        self._global_listeners.append(callback)

    def emit(self, event: Any) -> None:
        """Deliver *event* to catch-all listeners, then to its typed listeners."""
        for cb in self._global_listeners:
            cb(event)
        for cb in self._listeners.get(type(event), []):
            cb(event)
