"""Error types raised by the collection combinators."""

from __future__ import annotations

from typing import Any


class SanityError(Exception):
    """Base class for every error the combinators raise on their own.

    Failures raised by caller-supplied functions are never wrapped.
    """


class EmptyCollectionError(SanityError, ValueError):
    """Raised when an operation needs at least one element and got none."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() requires a non-empty collection")


class IndexOutOfRangeError(SanityError, IndexError):
    """Raised by positional access beyond the collection bounds.

    Keeps the requested index and the collection length for debugging.
    """

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of range for collection of length {length}")

    def __repr__(self) -> str:
        return f"IndexOutOfRangeError(index={self.index!r}, length={self.length!r})"


class LengthMismatchError(SanityError, ValueError):
    """Raised when paired sequences have different lengths."""

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(f"sequences have different lengths: {left} != {right}")

    def __repr__(self) -> str:
        return f"LengthMismatchError(left={self.left!r}, right={self.right!r})"


class KeyCollisionError(SanityError, KeyError):
    """Raised when renaming would bind two source keys to the same target key."""

    def __init__(self, key: Any, sources: tuple[Any, ...]) -> None:
        self.key = key
        self.sources = sources
        super().__init__(key)

    def __str__(self) -> str:
        return f"keys {self.sources!r} all map to {self.key!r}"

    def __repr__(self) -> str:
        return f"KeyCollisionError(key={self.key!r}, sources={self.sources!r})"
