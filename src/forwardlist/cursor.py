"""Forward cursors over a SingleLinkedList."""

from typing import Any, Generic, TypeVar

from forwardlist.errors import BeforeBeginError, EndCursorError, InvalidCursorError
from forwardlist.node import DETACHED, Node, Sentinel
from forwardlist.types import T

_C = TypeVar("_C", bound="ConstCursor[Any]")


class ConstCursor(Generic[T]):
    """
    Read-only, single-pass forward cursor.

    A cursor refers to one of three positions:
        - the before-begin sentinel of a list
        - a node holding an element
        - the end position (the absent link after the tail)

    A default constructed cursor is an end cursor. Cursors compare equal when
    they refer to the same position, regardless of flavour.
    """

    __slots__ = ("_node",)

    def __init__(self, node: Node[T] | Sentinel[T] | None = None) -> None:
        self._node = node

    def _element(self) -> Node[T]:
        """Return the referenced node, checking that it holds a live element."""
        node = self._node
        if node is None:
            raise EndCursorError("Cannot dereference the end position")
        if isinstance(node, Sentinel):
            raise BeforeBeginError("Cannot dereference the before-begin position")
        if node.detached:
            raise InvalidCursorError("Cursor refers to a node that was erased")
        return node

    @property
    def value(self) -> T:
        """The referenced element."""
        return self._element().value

    def advance(self: _C) -> _C:
        """Move to the next position in place and return self. O(1)."""
        node = self._node
        if node is None:
            raise EndCursorError("Cannot advance past the end position")
        successor = node.next
        if successor is DETACHED:
            raise InvalidCursorError("Cursor refers to a node that was erased")
        self._node = successor
        return self

    def advanced(self: _C) -> _C:
        """Return a new cursor one position further on, leaving self in place."""
        return self.copy().advance()

    def copy(self: _C) -> _C:
        """Return an independent cursor at the same position."""
        return type(self)(self._node)

    __copy__ = copy

    def as_const(self) -> "ConstCursor[T]":
        """Return a read-only cursor at the same position."""
        return ConstCursor(self._node)

    def is_end(self) -> bool:
        """Return True if the cursor is at the end position."""
        return self._node is None

    def is_before_begin(self) -> bool:
        """Return True if the cursor is at the before-begin position."""
        return isinstance(self._node, Sentinel)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstCursor):
            return NotImplemented
        return self._node is other._node

    def __repr__(self) -> str:
        name = type(self).__name__
        node = self._node
        if node is None:
            return f"{name}(end)"
        if isinstance(node, Sentinel):
            return f"{name}(before_begin)"
        if node.detached:
            return f"{name}(erased)"
        return f"{name}(value={node.value!r})"


class Cursor(ConstCursor[T]):
    """
    Mutating forward cursor.

    Subclass of ConstCursor, so it is accepted wherever a read-only cursor is
    expected. Assigning to ``value`` writes through to the list.
    """

    __slots__ = ()

    @ConstCursor.value.setter
    def value(self, value: T) -> None:
        self._element().value = value
