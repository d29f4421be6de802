"""Input events and the keys they refer to."""

from __future__ import annotations

import enum
import itertools
from dataclasses import dataclass


class KeyboardKey(enum.Enum):
    """Keys the engine reacts to."""

    A = "a"
    S = "s"
    D = "d"
    W = "w"


class Event:
    """Base event; each instance receives a unique, increasing id."""

    _ids = itertools.count()

    def __init__(self) -> None:
        self._event_id = next(Event._ids)

    def event_id(self) -> int:
        return self._event_id


@dataclass(eq=False)
class KeyDownEvent(Event):
    """A key being held down during a frame."""

    delta_time: float
    key: KeyboardKey

    def __post_init__(self) -> None:
        Event.__init__(self)


@dataclass(eq=False)
class MouseMoveEvent(Event):
    """The mouse having moved by (delta_x, delta_y) during a frame."""

    delta_time: float
    delta_x: float
    delta_y: float

    def __post_init__(self) -> None:
        Event.__init__(self)