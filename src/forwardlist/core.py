"""Main SingleLinkedList implementation."""

import logging
from collections.abc import Iterable, Iterator
from types import NotImplementedType
from typing import Generic

from forwardlist.cursor import ConstCursor, Cursor
from forwardlist.errors import (
    EmptyListError,
    EndCursorError,
    InvalidCursorError,
    NoSuccessorError,
)
from forwardlist.node import DETACHED, Node, Sentinel, detach
from forwardlist.types import T

logger = logging.getLogger(__name__)


class SingleLinkedList(Generic[T]):
    """
    Singly-linked sequence container with a before-begin sentinel.

    Front insertion/removal and insertion/erasure after a cursor are O(1),
    including at the very front via before_begin(). The element count is
    cached, so len() is O(1) as well.
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        """
        Initialize the list.

        Args:
            values: Optional iterable of initial elements, in iteration order.
                Passing another SingleLinkedList makes an independent copy.
        """
        self._head: Sentinel[T] = Sentinel()
        self._size = 0
        if values is not None:
            self._rebuild(values)

    def _rebuild(self, values: Iterable[T]) -> None:
        """Replace the contents with values (copy-and-swap)."""
        temp: SingleLinkedList[T] = type(self)()
        tail: Node[T] | Sentinel[T] = temp._head
        count = 0
        for value in values:
            node = Node(value)
            tail.next = node
            tail = node
            count += 1
        temp._size = count

        # Publish only once the whole copy exists; the old nodes end up in temp
        self.swap(temp)
        temp.clear()

    def assign(self, values: Iterable[T]) -> None:
        """
        Replace the contents with a copy of values.

        Assigning a list to itself is a no-op. If iterating values raises
        (including MemoryError), this list is left unchanged. On success all
        cursors into this list's previous elements are invalidated.
        """
        if values is self:
            return
        logger.debug("Assigning new contents to list of %d elements", self._size)
        self._rebuild(values)

    def copy(self) -> "SingleLinkedList[T]":
        """Return a new list with the same elements and independent nodes."""
        return type(self)(self)

    __copy__ = copy

    def get_size(self) -> int:
        """Return the number of elements. O(1)."""
        return self._size

    def is_empty(self) -> bool:
        """Return True if the list holds no elements. O(1)."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def front(self) -> T:
        """
        Return the first element.

        Raises:
            EmptyListError: If the list is empty
        """
        head = self._head.next
        if head is None:
            raise EmptyListError("front() on an empty list")
        return head.value

    def push_front(self, value: T) -> None:
        """Insert value as the new first element. O(1)."""
        self._head.next = Node(value, self._head.next)
        self._size += 1

    def pop_front(self) -> T:
        """
        Remove the first element and return it. O(1).

        Cursors to the removed element are invalidated.

        Raises:
            EmptyListError: If the list is empty
        """
        head = self._head.next
        if head is None:
            raise EmptyListError("pop_front() on an empty list")
        value = head.value
        self._head.next = detach(head)
        self._size -= 1
        return value

    def _predecessor(self, pos: ConstCursor[T]) -> Node[T] | Sentinel[T]:
        """Return the node after which insert_after()/erase_after() operate."""
        node = pos._node
        if node is None:
            raise EndCursorError("Cannot insert or erase after the end position")
        if isinstance(node, Sentinel):
            if node is not self._head:
                raise InvalidCursorError("Cursor refers to another list's before-begin position")
        elif node.detached:
            raise InvalidCursorError("Cursor refers to a node that was erased")
        return node

    def insert_after(self, pos: ConstCursor[T], value: T) -> Cursor[T]:
        """
        Insert value immediately after pos. O(1).

        Args:
            pos: before_begin() or a cursor to an element of this list
            value: Element to insert

        Returns:
            Cursor to the inserted element

        Raises:
            EndCursorError: If pos is the end position
            InvalidCursorError: If pos refers to an erased node or to another
                list's before-begin position
        """
        node = self._predecessor(pos)
        node.next = Node(value, node.next)  # type: ignore[arg-type]
        self._size += 1
        return Cursor(node.next)

    def erase_after(self, pos: ConstCursor[T]) -> Cursor[T]:
        """
        Erase the element immediately after pos. O(1).

        Cursors to the erased element are invalidated.

        Args:
            pos: before_begin() or a cursor to an element of this list that
                has a successor

        Returns:
            Cursor to the element now following pos (possibly end)

        Raises:
            EndCursorError: If pos is the end position
            NoSuccessorError: If pos is the last element (or before_begin()
                of an empty list)
            InvalidCursorError: If pos refers to an erased node or to another
                list's before-begin position
        """
        node = self._predecessor(pos)
        target = node.next
        if target is None:
            raise NoSuccessorError("erase_after() needs an element after the cursor")
        node.next = detach(target)  # type: ignore[arg-type]
        self._size -= 1
        return Cursor(node.next)  # type: ignore[arg-type]

    def clear(self) -> None:
        """Erase all elements, head to tail. Idempotent."""
        if self._size:
            logger.debug("Clearing list of %d elements", self._size)
        node = self._head.next
        self._head.next = None
        while node is not None:
            node = detach(node)
        self._size = 0

    def swap(self, other: "SingleLinkedList[T]") -> None:
        """
        Exchange contents with other in O(1).

        Each list keeps its own before-begin position; element cursors follow
        their nodes into the other list.
        """
        self._head.next, other._head.next = other._head.next, self._head.next
        self._size, other._size = other._size, self._size

    def begin(self) -> Cursor[T]:
        """Return a cursor to the first element (end() if empty)."""
        return Cursor(self._head.next)

    def end(self) -> Cursor[T]:
        """Return the end cursor. O(1)."""
        return Cursor()

    def before_begin(self) -> Cursor[T]:
        """Return the cursor preceding the first element."""
        return Cursor(self._head)

    def cbegin(self) -> ConstCursor[T]:
        """Read-only begin()."""
        return ConstCursor(self._head.next)

    def cend(self) -> ConstCursor[T]:
        """Read-only end()."""
        return ConstCursor()

    def cbefore_begin(self) -> ConstCursor[T]:
        """Read-only before_begin()."""
        return ConstCursor(self._head)

    def __iter__(self) -> Iterator[T]:
        node = self._head.next
        while node is not None:
            yield node.value
            successor = node.next
            if successor is DETACHED:
                raise InvalidCursorError("Element was erased during iteration")
            node = successor  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        if self is other:
            return True
        return self._size == other._size and all(a == b for a, b in zip(self, other))

    def __lt__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        if self is other:
            return False
        for left, right in zip(self, other):
            if left < right:
                return True
            if right < left:
                return False
        # One is a prefix of the other
        return self._size < other._size

    def __le__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return other < self

    def __ge__(self, other: object) -> bool | NotImplementedType:
        if not isinstance(other, SingleLinkedList):
            return NotImplemented
        return other < self or other == self


def swap(lhs: SingleLinkedList[T], rhs: SingleLinkedList[T]) -> None:
    """Exchange the contents of two lists in O(1)."""
    lhs.swap(rhs)
