"""Exception classes for forwardlist."""


class ForwardListError(Exception):
    """Base exception for all forwardlist errors."""


class EmptyListError(ForwardListError, IndexError):
    """Raised when the front of an empty list is popped or read."""


class CursorError(ForwardListError):
    """Base exception for cursor misuse."""


class EndCursorError(CursorError, IndexError):
    """Raised when the end position is dereferenced, advanced or used as a predecessor."""


class BeforeBeginError(CursorError):
    """Raised when the before-begin position is dereferenced."""


class NoSuccessorError(CursorError, IndexError):
    """Raised when erase_after() is given the last element, which has nothing to erase."""


class InvalidCursorError(CursorError):
    """Raised when a cursor refers to a destroyed node or to another list's before-begin position."""
