from __future__ import annotations

import threading
from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")


class Observable(Generic[T]):
    """A value holder that notifies subscribers when the value changes.

    Setting an equal value is a no-op, so subscribers only see distinct
    updates. Callbacks run on the thread that performed the update.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._lock = threading.RLock()
        self._subscribers: List[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        with self._lock:
            return self._value

    def set(self, value: T) -> None:
        with self._lock:
            if value == self._value:
                return
            self._value = value
            subscribers = list(self._subscribers)
        for callback in subscribers:
            callback(value)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def __repr__(self) -> str:
        return f"Observable({self.value!r})"
