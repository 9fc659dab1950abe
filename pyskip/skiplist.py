"""Probabilistic ordered set backed by a skip list.

Unlike a fixed-``_MAX_LEVEL`` skip list, the number of active levels tracks
the element count: after every insert or delete the list height is
re-derived as ``max(1, ceil(log2(size)))``. When that target rises, a new
top level is built by promoting a random half of the nodes of the level
below; when it falls, the top level is trimmed away.

Complexities (average case):
    • search   – O(log n)
    • insert   – O(log n) (plus an O(n / 2**h) promotion pass on growth)
    • delete   – O(log n)
    • iterate  – O(n)

Elements only need a total order. Pass ``cmp`` (three-way, ``<0 / 0 / >0``)
to order elements that do not implement rich comparisons, and ``rng`` (any
object with ``random()``) to make level assignment reproducible.
"""
from __future__ import annotations

import logging
import math
import random
from collections.abc import Callable, Iterator
from typing import Any, Generic, Optional, TypeVar

from .node import Node, _P

__all__ = ["SkipList", "generate_random_height", "get_max_height"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def generate_random_height(max_height: int, rng: Optional[random.Random] = None) -> int:
    """Sample a node height: 1 w.p. 1/2, 2 w.p. 1/4, ... capped at *max_height*."""
    rand = (rng or random).random
    height = 1
    while height < max_height and rand() < _P:
        height += 1
    return height


def get_max_height(n: int) -> int:
    """Target number of active levels for *n* elements."""
    if n <= 1:
        return 1
    return math.ceil(math.log2(n))


def _natural_cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class SkipList(Generic[T]):
    """Sorted multiset of ``T`` with expected logarithmic search/insert/delete."""

    def __init__(
        self,
        height: int = 1,
        *,
        cmp: Optional[Callable[[T, T], int]] = None,
        rng: Optional[random.Random] = None,
    ):
        if height < 1:
            raise ValueError(f"skip list height must be >= 1, got {height}")
        self._height = height
        self._size = 0
        self._head: Node[T] = Node(height)
        self._cmp: Callable[[T, T], int] = cmp or _natural_cmp
        self._rng = rng

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return self._size

    @property
    def height(self) -> int:
        """Number of active levels."""
        return self._height

    @property
    def head(self) -> Node[T]:
        """Sentinel head node, for diagnostic traversal."""
        return self._head

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head.next(0)
        while node is not None:
            yield node.value  # type: ignore[misc]
            node = node.next(0)

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __repr__(self) -> str:  # pragma: no cover
        return f"SkipList(size={self._size}, height={self._height})"

    # ------------------------------------------------------------------
    # Query API
    # ------------------------------------------------------------------
    def search(self, value: T) -> Optional[Node[T]]:
        """Return the first node holding *value*, or ``None``."""
        cmp = self._cmp
        current = self._head
        for level in reversed(range(self._height)):
            while (nxt := current.next(level)) is not None and cmp(nxt.value, value) < 0:  # type: ignore[arg-type]
                current = nxt
        candidate = current.next(0)
        if candidate is not None and cmp(candidate.value, value) == 0:  # type: ignore[arg-type]
            return candidate
        return None

    get = search

    def contains(self, value: T) -> bool:
        return self.search(value) is not None

    # ------------------------------------------------------------------
    # Mutation API
    # ------------------------------------------------------------------
    def insert(self, value: T, height: Optional[int] = None) -> None:
        """Insert *value*; equal elements are kept side by side.

        *height* pins the new node's height instead of sampling it. It must
        lie within the active height the list will have after this insert.
        """
        target = get_max_height(self._size + 1)
        if height is None:
            height = generate_random_height(target, self._rng)
        elif not 1 <= height <= max(self._height, target):
            raise ValueError(
                f"node height {height} outside 1..{max(self._height, target)}"
            )

        self._size += 1
        if self._height < target:
            self._grow(target)

        cmp = self._cmp
        update: list[Node[T]] = [self._head] * self._height
        current = self._head
        for level in reversed(range(self._height)):
            while (nxt := current.next(level)) is not None and cmp(nxt.value, value) < 0:  # type: ignore[arg-type]
                current = nxt
            update[level] = current

        node: Node[T] = Node(height, value)
        for level in reversed(range(height)):
            node.set_next(level, update[level].next(level))
            update[level].set_next(level, node)

    def delete(self, value: T) -> None:
        """Remove one occurrence of *value*; absent values are ignored."""
        cmp = self._cmp
        update: dict[int, Node[T]] = {}
        current = self._head
        for level in reversed(range(self._height)):
            while (nxt := current.next(level)) is not None:
                order = cmp(nxt.value, value)  # type: ignore[arg-type]
                if order < 0:
                    current = nxt
                    continue
                if order == 0:
                    update[level] = current
                break

        victim = current.next(0)
        if victim is None or cmp(victim.value, value) != 0:  # type: ignore[arg-type]
            return

        self._size -= 1
        target = get_max_height(self._size)
        if target < self._height:
            self._trim(target)

        # The first equal node met on each level is the victim itself.
        for level in reversed(range(victim.height)):
            update[level].set_next(level, victim.next(level))

    def clear(self) -> None:
        """Drop every element and reset to a single level."""
        self._head = Node(1)
        self._height = 1
        self._size = 0

    # ------------------------------------------------------------------
    # Height management
    # ------------------------------------------------------------------
    def _grow(self, new_height: int) -> None:
        """Raise the active height, building each new level from the one below."""
        old_height = self._height
        while self._height < new_height:
            top = self._height
            # The head is always the tallest node.
            self._head.grow()
            promoted = 0
            current = self._head
            node = self._head.next(top - 1)
            while node is not None:
                if node.maybe_grow(self._rng):
                    current.set_next(top, node)
                    current = node
                    promoted += 1
                node = node.next(top - 1)
            self._height += 1
            logger.debug("level %d built with %d promoted nodes", top, promoted)
        logger.debug("height grown %d -> %d (size=%d)", old_height, self._height, self._size)

    def _trim(self, new_height: int) -> None:
        """Lower the active height, truncating every node taller than *new_height*."""
        old_height = self._height
        # Level ``new_height`` is the lowest removed level; every node taller
        # than the new height is on its chain.
        node: Optional[Node[T]] = self._head
        while node is not None:
            following = node.next(new_height)
            node.trim(new_height)
            node = following
        self._height = new_height
        logger.debug("height trimmed %d -> %d (size=%d)", old_height, new_height, self._size)
