"""Growable contiguous buffer with amortized doubling."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar, overload

T = TypeVar("T")


class GrowBuffer(Sequence[T], Generic[T]):
    """Append-only sequence backed by a fixed-capacity slot list.

    Capacity starts at 0 and grows to ``max(2 * capacity + 1, required)``
    whenever a push would overflow it. Items ``[0, len)`` are valid; the
    remaining slots are unused. A MemoryError while growing propagates and
    leaves the old storage untouched.
    """

    __slots__ = ("_items", "_len")

    def __init__(self) -> None:
        self._items: list[T | None] = []
        self._len = 0

    @property
    def capacity(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return self._len

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        if isinstance(index, slice):
            return [self._items[i] for i in range(*index.indices(self._len))]  # type: ignore[misc]
        if index < 0:
            index += self._len
        if not 0 <= index < self._len:
            raise IndexError("GrowBuffer index out of range")
        return self._items[index]  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        for i in range(self._len):
            yield self._items[i]  # type: ignore[misc]

    def __repr__(self) -> str:
        return f"GrowBuffer({list(self)!r}, capacity={self.capacity})"

    def push(self, item: T) -> None:
        """Append *item*, growing the backing store when it is full."""
        if self._len + 1 > self.capacity:
            self._grow(self._len + 1)
        self._items[self._len] = item
        self._len += 1

    def free(self) -> None:
        """Release the backing store; the buffer is empty afterwards."""
        self._items = []
        self._len = 0

    def _grow(self, new_len: int) -> None:
        new_cap = max(2 * self.capacity + 1, new_len)
        # Build the new store fully before swapping it in
        items: list[T | None] = [None] * new_cap
        items[: self._len] = self._items[: self._len]
        self._items = items
