"""Tests for the diagnostic traversal helpers and the invariant checker."""
import pytest

from pyskip import Node, SkipList
from pyskip.debug import InvariantError, check, dump, iter_level

from conftest import Coin, HEADS, TAILS


@pytest.fixture
def pinned():
    """Three elements, two levels: level 1 holds 1 and 3."""
    sl = SkipList[int](rng=Coin([HEADS, TAILS]))
    sl.insert(1, height=1)
    sl.insert(2, height=1)
    sl.insert(3, height=2)
    return sl


def test_iter_level(pinned):
    assert [n.value for n in iter_level(pinned, 0)] == [1, 2, 3]
    assert [n.value for n in iter_level(pinned, 1)] == [1, 3]
    assert list(iter_level(pinned, 5)) == []


def test_dump(pinned):
    assert dump(pinned).splitlines() == [
        "SkipList(size=3, height=2)",
        "L1: 1 -> 3",
        "L0: 1 -> 2 -> 3",
    ]


def test_dump_empty():
    assert dump(SkipList[int]()).splitlines()[1:] == ["L0: (empty)"]


def test_check_accepts_valid(pinned):
    check(pinned)


def test_check_size_mismatch(pinned):
    pinned.head.set_next(0, pinned.get(2))
    with pytest.raises(InvariantError, match="size"):
        check(pinned)


def test_check_order(pinned):
    one, two, three = pinned.get(1), pinned.get(2), pinned.get(3)
    # Swap 1 and 2 on the bottom level.
    pinned.head.set_next(0, two)
    two.set_next(0, one)
    one.set_next(0, three)
    with pytest.raises(InvariantError, match="out of order"):
        check(pinned)


def test_check_level_consistency(pinned):
    stray = Node(2, 99)
    pinned.get(3).set_next(1, stray)
    with pytest.raises(InvariantError, match="missing from level 0"):
        check(pinned)


def test_check_height_relation():
    sl = SkipList[int](3)
    check(sl, exact_height=False)
    with pytest.raises(InvariantError, match="height"):
        check(sl)


def test_invariant_error_is_assertion():
    assert issubclass(InvariantError, AssertionError)
