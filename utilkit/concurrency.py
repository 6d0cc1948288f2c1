"""A value guarded by a lock."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class _LockGuard:
    """A lock held on behalf of an accessor, which may release and reacquire it."""

    def __init__(self, lock: Any) -> None:
        self._lock = lock
        self._owned = False

    @property
    def owns_lock(self) -> bool:
        return self._owned

    def acquire(self) -> None:
        if self._owned:
            raise RuntimeError("lock is already owned")
        self._lock.acquire()
        self._owned = True

    def release(self) -> None:
        if not self._owned:
            raise RuntimeError("lock is not owned")
        self._owned = False
        self._lock.release()

    def __enter__(self) -> _LockGuard:
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._owned:
            self.release()
        return False


class Container(Generic[T]):
    """Holds a value that is only reached while a lock is held."""

    def __init__(self, value: T = None, lock: Any = None) -> None:
        self._value = value
        self._lock = lock if lock is not None else threading.Lock()

    @property
    def raw(self) -> T:
        """The value, without taking the lock."""
        return self._value

    def access(self, accessor: Callable[[T], R]) -> R:
        """Call ``accessor(value)`` with the lock held and return its result."""
        with self._lock:
            return accessor(self._value)

    def access_with_lock(self, accessor: Callable[[T, _LockGuard], R]) -> R:
        """Call ``accessor(value, guard)``; the accessor may release the guard early."""
        with _LockGuard(self._lock) as guard:
            return accessor(self._value, guard)