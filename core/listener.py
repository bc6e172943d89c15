"""Subscription handle wrapping a single typed callback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Type, TypeVar

E = TypeVar("E")

Callback = Callable[[E], None]


@dataclass(frozen=True, eq=False, slots=True)
class ListenerHandle(Generic[E]):
    """Token returned by ``Dispatcher.subscribe``; keep it to unsubscribe later.

    Equality is object identity, so two handles around the same callback are
    removed independently.
    """

    event_type: Type[E]
    callback: Callback[E]

    def __post_init__(self) -> None:
        if not callable(self.callback):
            raise TypeError(f"listener callback must be callable, got {self.callback!r}")

    def invoke(self, event: E) -> None:
        self.callback(event)

    def __repr__(self) -> str:
        name = getattr(self.callback, "__qualname__", repr(self.callback))
        return f"ListenerHandle({self.event_type.__name__}, {name})"
