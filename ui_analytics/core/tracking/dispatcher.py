"""
core.tracking.dispatcher

Minimal in-process event source.

Host UI code (or the CLI replay) emits named events; any callbacks
registered for that name are invoked in registration order. This is the
shape InteractionTracker.attach() expects from a source:

    add_listener(event_name, callback)
    remove_listener(event_name, callback)
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List


logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class EventDispatcher:
    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)

    def add_listener(self, event_name: str, callback: Listener) -> None:
        self._listeners[event_name].append(callback)

    def remove_listener(self, event_name: str, callback: Listener) -> None:
        """Remove a previously added callback; unknown callbacks are ignored."""
        listeners = self._listeners.get(event_name)
        if not listeners:
            return
        try:
            listeners.remove(callback)
        except ValueError:
            logger.debug("Listener %r was not registered for %s", callback, event_name)

    def listener_count(self, event_name: str) -> int:
        return len(self._listeners.get(event_name, ()))

    def emit(self, event_name: str, *args: Any, **kwargs: Any) -> List[Any]:
        """Invoke every listener for `event_name` and return their results."""
        return [
            callback(*args, **kwargs)
            for callback in list(self._listeners.get(event_name, ()))
        ]
