"""PySkip: a probabilistic ordered-set container built on a skip list.

The package exposes :class:`pyskip.SkipList` together with its passive
:class:`pyskip.Node` record and the level-assignment helpers. Diagnostic
traversal and the invariant checker live in :mod:`pyskip.debug`.
"""

from __future__ import annotations

__all__ = [
    "Node",
    "SkipList",
    "generate_random_height",
    "get_max_height",
]

from .node import Node
from .skiplist import SkipList, generate_random_height, get_max_height
