"""Node storage for the singly-linked list."""

from typing import Final, Generic

from forwardlist.types import T


class _Detached:
    """Marker type for the link of a node the list has destroyed."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "DETACHED"


DETACHED: Final = _Detached()


class Node(Generic[T]):
    """A node owning one element and the link to its successor."""

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: "Node[T] | None" = None) -> None:
        self.value = value
        self.next: Node[T] | _Detached | None = next

    @property
    def detached(self) -> bool:
        """Return True once the owning list has destroyed this node."""
        return self.next is DETACHED


class Sentinel(Generic[T]):
    """
    Before-begin position of a list.

    Carries only a forward link, so it can precede any insertion or erasure
    but has no element to read.
    """

    __slots__ = ("next",)

    def __init__(self) -> None:
        self.next: Node[T] | None = None


def detach(node: Node[T]) -> Node[T] | None:
    """
    Destroy a node and return its former successor.

    The value is dropped and the link is replaced with DETACHED, so a cursor
    still referring to the node reports misuse instead of walking on.
    """
    successor = node.next
    node.value = None  # type: ignore[assignment]
    node.next = DETACHED
    return successor  # type: ignore[return-value]
