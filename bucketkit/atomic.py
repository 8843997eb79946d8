"""A thread-safe boolean flag."""

from __future__ import annotations

import threading


class AtomicBool:
    """A boolean that can be read and written safely from several threads."""

    __slots__ = ("_lock", "_value")

    def __init__(self, value: bool = False) -> None:
        self._lock = threading.Lock()
        self._value = bool(value)

    def set(self, value: bool) -> None:
        """Store ``value``."""
        with self._lock:
            self._value = bool(value)

    def get(self) -> bool:
        """Return the stored value."""
        with self._lock:
            return self._value

    def __bool__(self) -> bool:
        return self.get()

    def __repr__(self) -> str:
        return f"AtomicBool({self.get()!r})"