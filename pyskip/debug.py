"""Diagnostic helpers: level traversal, text dumps and an invariant checker.

These walk the structure through :attr:`SkipList.head` only, so they see
exactly what the search algorithm sees.
"""
from __future__ import annotations

from collections.abc import Iterator
from typing import Optional, TypeVar

from .node import Node
from .skiplist import SkipList, get_max_height

__all__ = ["InvariantError", "iter_level", "dump", "check"]

T = TypeVar("T")


class InvariantError(AssertionError):
    """Raised by :func:`check` when the structure is inconsistent."""


def iter_level(sl: SkipList[T], level: int) -> Iterator[Node[T]]:
    """Yield the nodes on *level*'s chain, head excluded."""
    node = sl.head.next(level)
    while node is not None:
        yield node
        node = node.next(level)


def dump(sl: SkipList[T]) -> str:
    """Render one line per level, top level first."""
    lines = [f"{sl!r}"]
    for level in reversed(range(sl.height)):
        values = " -> ".join(repr(n.value) for n in iter_level(sl, level))
        lines.append(f"L{level}: {values or '(empty)'}")
    return "\n".join(lines)


def check(sl: SkipList[T], exact_height: bool = True) -> None:
    """Verify the structural invariants of *sl*, raising on the first violation.

    Checks that level 0 is sorted, that every level is a subsequence of the
    level below, that each chained node is tall enough for its level, that
    the head spans every active level and that ``size`` matches level 0.
    With *exact_height* the active height must also equal
    ``max(1, ceil(log2(size)))``.
    """
    head = sl.head
    if head.height < sl.height:
        raise InvariantError(f"head height {head.height} < list height {sl.height}")
    for level in range(sl.height, head.height):
        if head.next(level) is not None:
            raise InvariantError(f"head links past the active height at level {level}")

    bottom = list(iter_level(sl, 0))
    if len(bottom) != sl.size:
        raise InvariantError(f"level 0 holds {len(bottom)} nodes, size is {sl.size}")
    cmp = sl._cmp
    for left, right in zip(bottom, bottom[1:]):
        if cmp(left.value, right.value) > 0:  # type: ignore[arg-type]
            raise InvariantError(f"level 0 out of order: {left.value!r} before {right.value!r}")

    for level in range(sl.height):
        below: Optional[Node[T]] = head
        for node in iter_level(sl, level):
            if node.height <= level:
                raise InvariantError(f"node {node.value!r} of height {node.height} chained on level {level}")
            if level == 0:
                continue
            # Advance along the lower chain until this node shows up.
            while below is not None and below is not node:
                below = below.next(level - 1)
            if below is None:
                raise InvariantError(f"node {node.value!r} on level {level} missing from level {level - 1}")

    if exact_height and sl.height != get_max_height(sl.size):
        raise InvariantError(
            f"height {sl.height} != {get_max_height(sl.size)} for size {sl.size}"
        )
