from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class FrameCache(Generic[T]):
    """Holds one built layer until it is invalidated.

    State-changing events call ``invalidate``; the next ``get`` rebuilds.
    """

    def __init__(self) -> None:
        self._value: Optional[T] = None
        self._dirty = True
        self.builds = 0

    @property
    def dirty(self) -> bool:
        return self._dirty

    def invalidate(self) -> None:
        self._dirty = True

    def get(self, build: Callable[[], T]) -> T:
        if self._dirty or self._value is None:
            self._value = build()
            self._dirty = False
            self.builds += 1
        return self._value

    def clear(self) -> None:
        self._value = None
        self._dirty = True
