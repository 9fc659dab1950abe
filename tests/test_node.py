"""Unit tests for the skip-list Node record."""
import pytest

from pyskip import Node

from conftest import Coin, HEADS, TAILS


def test_new_node():
    """A fresh node has one empty link per level."""
    node = Node(3, "x")
    assert node.value == "x"
    assert node.height == 3
    assert [node.next(i) for i in range(3)] == [None, None, None]


def test_head_sentinel_has_no_value():
    assert Node(1).value is None


def test_zero_height_rejected():
    with pytest.raises(ValueError):
        Node(0, 1)


def test_next_out_of_range_is_none():
    """Reads outside [0, height) return None instead of failing."""
    node = Node(2, 1)
    other = Node(1, 2)
    node.set_next(0, other)
    node.set_next(1, other)
    assert node.next(-1) is None
    assert node.next(2) is None
    assert node.next(100) is None


def test_set_next_out_of_range_raises():
    node = Node(2, 1)
    with pytest.raises(IndexError):
        node.set_next(2, Node(1, 2))
    with pytest.raises(IndexError):
        node.set_next(-1, Node(1, 2))


def test_grow_appends_empty_level():
    node = Node(1, 1)
    other = Node(1, 2)
    node.set_next(0, other)
    node.grow()
    assert node.height == 2
    assert node.next(0) is other
    assert node.next(1) is None
    node.set_next(1, other)
    assert node.next(1) is other


def test_maybe_grow_heads():
    node = Node(1, 1)
    assert node.maybe_grow(Coin([HEADS])) is True
    assert node.height == 2


def test_maybe_grow_tails():
    node = Node(1, 1)
    assert node.maybe_grow(Coin([TAILS])) is False
    assert node.height == 1


def test_maybe_grow_default_source():
    """Without an explicit source the module-level generator is used."""
    node = Node(1, 1)
    outcomes = {node.maybe_grow() for _ in range(200)}
    assert outcomes == {True, False}
    assert node.height > 1


def test_trim_drops_upper_levels():
    node = Node(4, 1)
    other = Node(4, 2)
    for level in range(4):
        node.set_next(level, other)
    node.trim(2)
    assert node.height == 2
    assert node.next(1) is other
    assert node.next(2) is None
    assert node.next(3) is None
    # Regrowing starts from a cleared level.
    node.grow()
    assert node.next(2) is None


def test_trim_never_expands():
    node = Node(2, 1)
    with pytest.raises(ValueError):
        node.trim(3)
    with pytest.raises(ValueError):
        node.trim(0)
    node.trim(2)
    assert node.height == 2
