"""Type-keyed event dispatcher with immediate and queued delivery."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Deque, Dict, Iterable, Optional, Tuple, Type, TypeVar, cast

from core.config_models import DispatcherConfig
from core.events import event_name
from core.listener import Callback, ListenerHandle
from core.listener_group import EventGroup, ListenerGroup

LOGGER = logging.getLogger(__name__)

E = TypeVar("E")


class Dispatcher:
    """Route events to listeners registered for the event's exact type.

    ``publish`` delivers on the caller's stack before returning. ``enqueue``
    only buffers; the embedding application flushes the buffer by calling
    ``drain_queue`` at its own cadence (typically once per tick).

    Listener exceptions are not caught: they abort the current dispatch and
    propagate to the caller of ``publish``/``drain_queue``. Events still
    queued at that point stay queued for the next drain.

    Instances are not thread-safe. Callers using one dispatcher from several
    threads must serialise every call themselves.
    """

    def __init__(self, trace: bool = False) -> None:
        self.trace = trace
        self._groups: Dict[type, EventGroup] = {}
        self._queue: Deque[object] = deque()

    @classmethod
    def from_config(cls, config: DispatcherConfig) -> "Dispatcher":
        return cls(trace=config.trace)

    def subscribe(self, event_type: Type[E], callback: Callback[E]) -> ListenerHandle[E]:
        """Register ``callback`` for ``event_type`` and return its handle."""

        if not isinstance(event_type, type):
            raise TypeError(f"event_type must be a class, got {event_type!r}")
        handle = ListenerHandle(event_type, callback)
        self._get_or_create_group(event_type).subscribe(handle)
        LOGGER.debug("Subscribed %r", handle)
        return handle

    def unsubscribe(self, handle: ListenerHandle[Any]) -> None:
        """Remove ``handle``; unknown handles and types are ignored."""

        group = self._typed_group(handle.event_type)
        if group is None:
            return
        if group.unsubscribe(handle):
            LOGGER.debug("Unsubscribed %r", handle)

    def publish(self, event: object, event_type: Optional[type] = None) -> None:
        """Deliver ``event`` synchronously.

        The route is ``type(event)`` unless ``event_type`` names the type to
        publish as, for instance a base class of ``event``. Events with no
        registered group are dropped.
        """

        if event_type is None:
            event_type = type(event)
        elif not isinstance(event, event_type):
            raise TypeError(f"{event_name(event)} is not an instance of {event_type.__name__}")

        group = self._groups.get(event_type)
        if group is None:
            LOGGER.debug("No listeners for %s, dropped", event_type.__name__)
            return
        if self.trace:
            LOGGER.debug("Publishing %s to %d listener(s)", event_name(event), len(group))
        group.invoke_untyped(event)

    def enqueue(self, event: object) -> None:
        """Buffer ``event`` until the next ``drain_queue``."""

        self._queue.append(event)

    def drain_queue(self) -> int:
        """Publish queued events in FIFO order until the queue is empty.

        Events enqueued by listeners during the drain are delivered by the same
        call. Returns the number of events dispatched.
        """

        if not self._queue:
            return 0

        dispatched = 0
        while self._queue:
            event = self._queue.popleft()
            self.publish(event)
            dispatched += 1
        LOGGER.debug("Drained %d queued event(s)", dispatched)
        return dispatched

    def listeners(self, event_type: type) -> Tuple[ListenerHandle[Any], ...]:
        """Handles currently registered for ``event_type``, for tests and debugging."""

        group = self._typed_group(event_type)
        return group.listeners() if group is not None else ()

    def event_types(self) -> Iterable[type]:
        return tuple(self._groups)

    @property
    def pending_count(self) -> int:
        return len(self._queue)

    @property
    def has_pending(self) -> bool:
        return bool(self._queue)

    def _typed_group(self, event_type: Type[E]) -> Optional[ListenerGroup[E]]:
        # Groups are only ever created by _get_or_create_group, keyed by their own type.
        return cast(Optional[ListenerGroup[E]], self._groups.get(event_type))

    def _get_or_create_group(self, event_type: Type[E]) -> ListenerGroup[E]:
        group = self._typed_group(event_type)
        if group is None:
            group = ListenerGroup(event_type)
            self._groups[event_type] = group
        return group
