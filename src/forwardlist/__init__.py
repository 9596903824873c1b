"""forwardlist - Singly-linked list with before-begin cursors and O(1) positional operations."""

import logging

from forwardlist.core import SingleLinkedList, swap
from forwardlist.cursor import ConstCursor, Cursor
from forwardlist.errors import (
    BeforeBeginError,
    CursorError,
    EmptyListError,
    EndCursorError,
    ForwardListError,
    InvalidCursorError,
    NoSuccessorError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "SingleLinkedList",
    "swap",
    "Cursor",
    "ConstCursor",
    "ForwardListError",
    "EmptyListError",
    "CursorError",
    "EndCursorError",
    "BeforeBeginError",
    "NoSuccessorError",
    "InvalidCursorError",
]
