"""Optional base record for application events.

The dispatcher routes any object by its runtime type, so subclassing
``BaseEvent`` is a convenience rather than a requirement.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class BaseEvent:
    """Common parent for application-defined events."""

    @property
    def event_name(self) -> str:
        return type(self).__name__


def event_name(event: object) -> str:
    """Readable name for log lines, whether or not the event subclasses ``BaseEvent``."""

    if isinstance(event, BaseEvent):
        return event.event_name
    return type(event).__name__
