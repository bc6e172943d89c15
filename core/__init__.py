"""Convenience imports for the event dispatcher."""

from .dispatcher import Dispatcher
from .events import BaseEvent
from .listener import ListenerHandle
from .listener_group import EventGroup, ListenerGroup

__all__ = ["BaseEvent", "Dispatcher", "EventGroup", "ListenerGroup", "ListenerHandle"]
