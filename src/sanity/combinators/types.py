"""Combinator type aliases and container helpers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, Protocol, TypeVar

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
K = TypeVar("K")
V = TypeVar("V")

Predicate = Callable[[T], Any]
LessThan = Callable[[T, T], bool]


class SupportsLessThan(Protocol):
    """Protocol for values ordered by the < operator."""

    def __lt__(self, other: Any, /) -> bool:
        ...


class SupportsGreaterThan(Protocol):
    """Protocol for values ordered by the > operator."""

    def __gt__(self, other: Any, /) -> bool:
        ...


def as_sequence(coll: Iterable[T]) -> Sequence[T]:
    """Return coll itself if it is a Sequence, otherwise a list of its items."""
    if isinstance(coll, Sequence):
        return coll
    return list(coll)


def like(template: Iterable[Any], items: Iterable[Any]) -> Any:
    """Build a new container of the same kind as template.

    Lists and tuples keep their type. A string template gives a string
    when every item is a string and a list otherwise, so mixing in other
    values never fails. Anything else becomes a list.
    """
    if isinstance(template, str):
        built = list(items)
        if all(isinstance(item, str) for item in built):
            return "".join(built)
        return built
    if isinstance(template, tuple):
        return tuple(items)
    return list(items)


def like_projection(template: Iterable[Any], items: Iterable[Any]) -> Any:
    """Like like(), but strings yield lists since projected items may not be characters."""
    if isinstance(template, tuple):
        return tuple(items)
    return list(items)
