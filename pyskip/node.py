"""Variably-tall skip-list node.

A node is a passive record: one element plus one forward link per level it
participates in. All multi-level traversal lives in :class:`~pyskip.SkipList`;
the node only exposes level-indexed link access and height mutation.

Invariant: ``len(node._forward) == node.height`` at all times.
"""
from __future__ import annotations

import random
from typing import Generic, Optional, TypeVar

__all__ = ["Node"]

T = TypeVar("T")

_P = 0.5


class Node(Generic[T]):
    """One element and its forward links, indexed ``0 .. height - 1``."""

    __slots__ = ("_value", "_forward")

    def __init__(self, height: int, value: Optional[T] = None):
        if height < 1:
            raise ValueError(f"node height must be >= 1, got {height}")
        self._value = value
        self._forward: list[Optional[Node[T]]] = [None] * height

    @property
    def value(self) -> Optional[T]:
        """Stored element (``None`` for the head sentinel)."""
        return self._value

    @property
    def height(self) -> int:
        return len(self._forward)

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------
    def next(self, level: int) -> Optional[Node[T]]:
        """Forward link at *level*, or ``None`` when the level is out of range."""
        if level < 0 or level >= len(self._forward):
            return None
        return self._forward[level]

    def set_next(self, level: int, node: Optional[Node[T]]) -> None:
        if level < 0 or level >= len(self._forward):
            raise IndexError(f"level {level} out of range for node of height {self.height}")
        self._forward[level] = node

    # ------------------------------------------------------------------
    # Height mutation
    # ------------------------------------------------------------------
    def grow(self) -> None:
        """Append one empty level on top."""
        self._forward.append(None)

    def maybe_grow(self, rng: Optional[random.Random] = None) -> bool:
        """Grow by one level with probability 1/2; report whether it grew."""
        if (rng or random).random() < _P:
            self.grow()
            return True
        return False

    def trim(self, new_height: int) -> None:
        """Drop every level at index >= *new_height*. Never expands."""
        if not 1 <= new_height <= len(self._forward):
            raise ValueError(f"cannot trim node of height {self.height} to {new_height}")
        del self._forward[new_height:]

    def __repr__(self) -> str:  # pragma: no cover
        return f"Node<{self._value!r} h={self.height}>"
