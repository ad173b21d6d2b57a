#!/usr/bin/env python
"""
Change notifications for collection and object models.

A model that wants to tell the world about e.g. a successful sync
inherits from :class:`DAVEventListener` and dispatches :class:`DAVEvent`
objects to whoever subscribed to that event type.
"""

import logging
from typing import Any
from typing import Callable
from typing import Dict
from typing import List
from typing import Tuple

log = logging.getLogger(__name__)

Listener = Callable[["DAVEvent"], Any]


class DAVEvent:
    """
    An event of some ``type``, all options are stored as attributes.

    An option named ``type`` replaces the positional one.  Events are
    equal when their attributes are; being mutable, they aren't hashable.
    """

    def __init__(self, type: str, /, **options: Any) -> None:
        self.type = type
        for key, value in options.items():
            setattr(self, key, value)

    def __repr__(self) -> str:
        attrs = ", ".join(
            "%s=%r" % (k, v) for k, v in self.__dict__.items() if k != "type"
        )
        if attrs:
            return "DAVEvent(%r, %s)" % (self.type, attrs)
        return "DAVEvent(%r)" % self.type

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DAVEvent) and self.__dict__ == other.__dict__

    __hash__ = None


class DAVEventListener:
    def __init__(self) -> None:
        self._event_listeners: Dict[str, List[Tuple[Listener, bool]]] = {}

    def add_event_listener(
        self, type: str, listener: Listener, once: bool = False
    ) -> None:
        """
        Call ``listener`` for every event of ``type``, or only for the
        next one if ``once`` is set.
        """
        self._event_listeners.setdefault(type, []).append((listener, once))

    def remove_event_listener(self, type: str, listener: Listener) -> None:
        listeners = self._event_listeners.get(type)
        if not listeners:
            return
        for i, (registered, _) in enumerate(listeners):
            if registered == listener:
                del listeners[i]
                return

    def dispatch_event(self, type: str, event: DAVEvent) -> None:
        """
        Call the listeners registered for ``type`` with ``event``.

        One-shot listeners are unregistered and called first, then the
        others, each group in the order they were added.
        """
        listeners = self._event_listeners.get(type)
        if not listeners:
            return

        once = [listener for listener, is_once in listeners if is_once]
        always = [listener for listener, is_once in listeners if not is_once]
        log.debug(f"dispatching {event!r} to {len(once) + len(always)} listeners")

        for listener in once:
            self.remove_event_listener(type, listener)
            listener(event)
        for listener in always:
            listener(event)
