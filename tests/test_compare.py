"""Tests for list equality and lexicographic ordering."""

import pytest

from forwardlist import SingleLinkedList


def test_equal_lists() -> None:
    """Test equality of lists with the same elements."""
    a = SingleLinkedList([1, 2, 3])
    b = SingleLinkedList([1, 2, 3])
    assert a == b
    assert not a != b
    assert not a < b
    assert not b < a
    assert a <= b
    assert a >= b


def test_empty_lists_are_equal() -> None:
    """Test equality of empty lists."""
    assert SingleLinkedList[int]() == SingleLinkedList[int]()
    assert not SingleLinkedList[int]() < SingleLinkedList[int]()


def test_different_sizes_are_unequal() -> None:
    """Test that a prefix is not equal to the longer list."""
    assert SingleLinkedList([1, 2]) != SingleLinkedList([1, 2, 3])


def test_first_difference_decides() -> None:
    """Test that the first differing element decides the order."""
    a = SingleLinkedList([1, 2, 9])
    b = SingleLinkedList([1, 3])
    assert a < b
    assert b > a
    assert a <= b
    assert b >= a
    assert not a > b


def test_prefix_is_smaller() -> None:
    """Test that a proper prefix orders first."""
    short = SingleLinkedList(["a"])
    long = SingleLinkedList(["a", "b"])
    assert short < long
    assert not long < short
    assert SingleLinkedList[str]() < short


def test_self_comparison() -> None:
    """Test that a list compares equal to itself."""
    lst = SingleLinkedList([3, 1, 2])
    assert lst == lst
    assert not lst != lst
    assert not lst < lst
    assert lst <= lst
    assert not lst > lst
    assert lst >= lst


def test_ordering_uses_only_less_than() -> None:
    """Test that ordering relies on element < alone."""

    class Key:
        def __init__(self, n: int) -> None:
            self.n = n

        def __lt__(self, other: "Key") -> bool:
            return self.n < other.n

    a = SingleLinkedList([Key(1), Key(2)])
    b = SingleLinkedList([Key(1), Key(3)])
    assert a < b
    assert not b < a


def test_incomparable_elements_are_equivalent() -> None:
    """Test elements that are neither less nor greater."""
    nan = float("nan")
    a = SingleLinkedList([nan, 1.0])
    b = SingleLinkedList([nan, 2.0])
    assert a < b


def test_self_comparison_skips_elements() -> None:
    """Test that identity decides self-comparison, as for built-in lists."""
    nan = float("nan")
    lst = SingleLinkedList([nan])
    duplicate = SingleLinkedList(lst)
    assert lst == lst
    assert lst <= lst
    assert not lst == duplicate
    assert not lst <= duplicate
    assert ([nan] == [nan]) is True


def test_ordering_defers_to_other_types() -> None:
    """Test that ordering against a non-list returns NotImplemented."""
    lst = SingleLinkedList([1])
    assert lst.__lt__([1]) is NotImplemented
    assert lst.__le__([1]) is NotImplemented
    assert lst.__gt__([1]) is NotImplemented
    assert lst.__ge__([1]) is NotImplemented


def test_sorted_lists() -> None:
    """Test that lists sort lexicographically."""
    lists = [SingleLinkedList(v) for v in ([2], [1, 5], [], [1], [1, 2, 3])]
    ordered = sorted(lists)
    assert [list(lst) for lst in ordered] == [[], [1], [1, 2, 3], [1, 5], [2]]


def test_compare_with_other_types() -> None:
    """Test comparing against objects that are not lists."""
    lst = SingleLinkedList([1, 2])
    assert lst != [1, 2]
    assert not lst == (1, 2)
    with pytest.raises(TypeError):
        _ = lst < [1, 2]
    with pytest.raises(TypeError):
        _ = lst >= 3
