"""Structural interface shared by every RMQ structure."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["RMQ"]


@runtime_checkable
class RMQ(Protocol):
    """Anything built once from a sequence that answers ``rmq(i, j)``.

    ``rmq(i, j)`` returns an index ``k`` with ``i <= k <= j`` whose element is
    minimal over ``elements[i..j]``. Callers guarantee ``0 <= i <= j < len``;
    other arguments are not checked.
    """

    def rmq(self, i: int, j: int) -> int:
        ...

    def __len__(self) -> int:
        ...
