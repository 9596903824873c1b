"""Type definitions for forwardlist."""

from typing import TypeVar

# Element type stored in a list
T = TypeVar("T")
