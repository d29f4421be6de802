"""Queued event dispatch to registered callbacks."""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, Type, TypeVar

from .events import Event, KeyDownEvent, MouseMoveEvent

E = TypeVar("E", bound=Event)
Callback = Callable[[E], None]


class CallbackList(Generic[E]):
    """Ordered collection of callbacks that receive fired events."""

    def __init__(self) -> None:
        self._callbacks: List[Callable[[E], None]] = []

    def add_callback(self, callback: Callable[[E], None]) -> None:
        self._callbacks.append(callback)

    def remove_callback(self, callback: Callable[[E], None]) -> None:
        """Remove every registration equal to ``callback``."""
        self._callbacks = [cb for cb in self._callbacks if cb != callback]

    def fire_event(self, event: E) -> None:
        for callback in list(self._callbacks):
            callback(event)

    def __len__(self) -> int:
        return len(self._callbacks)


class QueuedDispatcher(Generic[E]):
    """Collects events and delivers them all on the next update."""

    def __init__(self) -> None:
        self._queue: List[E] = []

    def dispatch_event(self, event: E) -> None:
        self._queue.append(event)

    def update(self, listeners: CallbackList[E]) -> None:
        """Deliver queued events; events dispatched meanwhile wait for the next update."""
        pending, self._queue = self._queue, []
        for event in pending:
            listeners.fire_event(event)

    def __len__(self) -> int:
        return len(self._queue)


class EventManager(Generic[E]):
    """Queues events of one type and hands them to its callbacks on update."""

    def __init__(self, event_type: Type[E]) -> None:
        if not (isinstance(event_type, type) and issubclass(event_type, Event)):
            raise TypeError("EventManager event type must be a subclass of Event")
        self.event_type = event_type
        self._dispatcher: QueuedDispatcher[E] = QueuedDispatcher()
        self._listeners: CallbackList[E] = CallbackList()

    def update(self) -> None:
        self._dispatcher.update(self._listeners)

    def dispatch_event(self, event: E) -> None:
        if not isinstance(event, self.event_type):
            raise TypeError(
                f"expected {self.event_type.__name__}, got {type(event).__name__}"
            )
        self._dispatcher.dispatch_event(event)

    def add_event_callback(self, callback: Callable[[E], None]) -> None:
        self._listeners.add_callback(callback)


class KeyboardEventManager(EventManager[KeyDownEvent]):
    """Process-wide manager for key-down events."""

    _instance: Optional["KeyboardEventManager"] = None

    def __init__(self) -> None:
        super().__init__(KeyDownEvent)

    @classmethod
    def instance(cls) -> "KeyboardEventManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance


class MouseEventManager(EventManager[MouseMoveEvent]):
    """Process-wide manager for mouse-move events."""

    _instance: Optional["MouseEventManager"] = None

    def __init__(self) -> None:
        super().__init__(MouseMoveEvent)

    @classmethod
    def instance(cls) -> "MouseEventManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance