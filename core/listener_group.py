"""Per-type listener collections."""

from __future__ import annotations

import logging
from typing import Generic, List, Protocol, Tuple, Type, TypeVar, runtime_checkable

from core.listener import ListenerHandle

LOGGER = logging.getLogger(__name__)

E = TypeVar("E")


@runtime_checkable
class EventGroup(Protocol):
    """Type-erased view of a group: accepts any event and invokes if it matches."""

    event_type: type

    def invoke_untyped(self, event: object) -> None:  # pragma: no cover - Protocol
        ...

    def __len__(self) -> int:  # pragma: no cover - Protocol
        ...


class ListenerGroup(Generic[E]):
    """Ordered handles for exactly one event type."""

    def __init__(self, event_type: Type[E]) -> None:
        self.event_type = event_type
        self._handles: List[ListenerHandle[E]] = []

    def subscribe(self, handle: ListenerHandle[E]) -> None:
        """Append ``handle``; adding the same handle twice makes it fire twice."""

        if handle.event_type is not self.event_type:
            raise TypeError(
                f"handle for {handle.event_type.__name__} cannot join "
                f"the {self.event_type.__name__} group"
            )
        self._handles.append(handle)

    def unsubscribe(self, handle: ListenerHandle[E]) -> bool:
        """Remove the first registration of ``handle``; unknown handles are ignored."""

        for index, current in enumerate(self._handles):
            if current is handle:
                del self._handles[index]
                return True
        return False

    def invoke(self, event: E) -> None:
        # Iterate a snapshot: changes made by callbacks apply to the next dispatch.
        for handle in tuple(self._handles):
            handle.invoke(event)

    def invoke_untyped(self, event: object) -> None:
        if not isinstance(event, self.event_type):
            LOGGER.debug(
                "Group %s ignored foreign event %s",
                self.event_type.__name__,
                type(event).__name__,
            )
            return
        self.invoke(event)

    def listeners(self) -> Tuple[ListenerHandle[E], ...]:
        return tuple(self._handles)

    def __len__(self) -> int:
        return len(self._handles)
