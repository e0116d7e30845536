"""Sequence combinators: first, rest, map, reduce, filter, take, drop, ...

Every function returns a new container and leaves its inputs untouched.
Several names shadow builtins (map, filter, any); code in this module
never calls those builtins by name.
"""

from __future__ import annotations

import functools
import itertools
import random
from collections.abc import Callable, Iterable
from typing import Any, overload

from sanity.errors import EmptyCollectionError, IndexOutOfRangeError
from sanity.rng import generator as default_generator

from .types import (
    A,
    LessThan,
    Predicate,
    SupportsGreaterThan,
    SupportsLessThan,
    T,
    U,
    as_sequence,
    like,
    like_projection,
)

_MISSING: Any = object()


def first(coll: Iterable[T]) -> T:
    """Return the first element of coll.

    Raises:
        EmptyCollectionError: If coll has no elements
    """
    for item in coll:
        return item
    raise EmptyCollectionError("first")


def rest(coll: Iterable[T]) -> Any:
    """Return all but the first element. An empty input yields an empty result."""
    return like(coll, itertools.islice(coll, 1, None))


def last(coll: Iterable[T]) -> T:
    """Return the last element of coll.

    Raises:
        EmptyCollectionError: If coll has no elements
    """
    seq = as_sequence(coll)
    if len(seq) == 0:
        raise EmptyCollectionError("last")
    return seq[-1]


def map(coll: Iterable[T], func: Callable[[T], U]) -> Any:
    """Apply func to each element, keeping length and order.

    Args:
        coll: Input sequence
        func: Projection applied to every element

    Returns:
        New list (or tuple, for tuple input) with result[i] == func(coll[i])
    """
    return like_projection(coll, [func(item) for item in coll])


def _fold(init: A, items: Iterable[T], func: Callable[[A, T], A]) -> A:
    memo = init
    for item in items:
        memo = func(memo, item)
    return memo


def _fold_nonempty(coll: Iterable[T], func: Callable[[T, T], T], operation: str) -> T:
    items = iter(coll)
    try:
        init = next(items)
    except StopIteration:
        raise EmptyCollectionError(operation) from None
    return _fold(init, items, func)


@overload
def reduce(coll: Iterable[T], func: Callable[[T, T], T], /) -> T:
    ...


@overload
def reduce(init: A, coll: Iterable[T], func: Callable[[A, T], A], /) -> A:
    ...


def reduce(*args: Any) -> Any:
    """Left fold over a collection.

    reduce(init, coll, func) folds coll starting from init.
    reduce(coll, func) starts from first(coll) and folds rest(coll).

    Raises:
        EmptyCollectionError: If coll is empty and no init was given
        TypeError: If called with anything but 2 or 3 positional arguments
    """
    if len(args) == 3:
        init, coll, func = args
        return _fold(init, coll, func)
    if len(args) == 2:
        coll, func = args
        return _fold_nonempty(coll, func, "reduce")
    raise TypeError(f"reduce() takes 2 or 3 positional arguments but {len(args)} were given")


def minimum(coll: Iterable[SupportsLessThan]) -> Any:
    """Return the smallest element; the earliest one wins ties."""
    return _fold_nonempty(coll, lambda a, b: b if b < a else a, "minimum")


def maximum(coll: Iterable[SupportsGreaterThan]) -> Any:
    """Return the largest element; the earliest one wins ties."""
    return _fold_nonempty(coll, lambda a, b: b if b > a else a, "maximum")


def filter(coll: Iterable[T], pred: Predicate[T]) -> Any:
    """Keep the elements for which pred is true, in their original order."""
    return like(coll, [item for item in coll if pred(item)])


def remove(coll: Iterable[T], pred: Predicate[T]) -> Any:
    """Keep the elements for which pred is false, in their original order."""
    return like(coll, [item for item in coll if not pred(item)])


def every(coll: Iterable[T], pred: Predicate[T]) -> bool:
    """True if pred holds for every element (vacuously true when empty)."""
    for item in coll:
        if not pred(item):
            return False
    return True


def any(coll: Iterable[T], pred: Predicate[T]) -> bool:
    """True if pred holds for at least one element."""
    for item in coll:
        if pred(item):
            return True
    return False


def contains(coll: Iterable[Any], value: Any) -> bool:
    """True if some element compares equal to value.

    Elements are compared one by one, so contains("abc", "ab") is False.
    """
    for item in coll:
        if item == value:
            return True
    return False


def index_of(coll: Iterable[Any], value: Any) -> int:
    """Return the 0-based index of the first element equal to value, or -1."""
    for index, item in enumerate(coll):
        if item == value:
            return index
    return -1


def _ordering_key(less: LessThan[Any], key: Callable[[Any], Any] | None) -> Callable[[Any], Any]:
    def compare(a: Any, b: Any) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    wrap = functools.cmp_to_key(compare)
    if key is None:
        return wrap
    return lambda item: wrap(key(item))


def sort(
    coll: Iterable[T],
    less: LessThan[Any] | None = None,
    *,
    key: Callable[[T], Any] | None = None,
) -> Any:
    """Return a stably sorted copy of coll.

    Args:
        coll: Input sequence
        less: Strict "less than" callable, defaults to the < operator
        key: Optional projection applied before comparing

    Returns:
        New sequence ordered least to greatest
    """
    items = list(coll)
    if less is None:
        items.sort(key=key)
    else:
        items.sort(key=_ordering_key(less, key))
    return like(coll, items)


def shuffle(coll: Iterable[T], rng: random.Random | None = None) -> Any:
    """Return a uniformly random permutation of coll.

    Args:
        coll: Input sequence
        rng: Generator to draw from, defaults to the calling thread's generator
    """
    items = list(coll)
    (rng if rng is not None else default_generator()).shuffle(items)
    return like(coll, items)


def reverse(coll: Iterable[T]) -> Any:
    """Return coll with its elements in reverse order."""
    return like(coll, reversed(list(coll)))


def nth(coll: Iterable[T], index: int, not_found: Any = _MISSING) -> Any:
    """Return the element at a 0-based index.

    Negative indexes are out of range; they do not count from the end.

    Args:
        coll: Input sequence
        index: Position to read
        not_found: Returned instead of raising when index is out of range

    Raises:
        IndexOutOfRangeError: If index is out of range and no not_found was given
    """
    seq = as_sequence(coll)
    if 0 <= index < len(seq):
        return seq[index]
    if not_found is _MISSING:
        raise IndexOutOfRangeError(index, len(seq))
    return not_found


def cons(coll: Iterable[T], item: T) -> Any:
    """Return a new sequence with item in front of coll."""
    return like(coll, itertools.chain((item,), coll))


def conj(coll: Iterable[T], item: T) -> Any:
    """Return a new sequence with item appended to coll."""
    return like(coll, itertools.chain(coll, (item,)))


def take(coll: Iterable[T], n: int) -> Any:
    """Return the first n elements; n is clamped to the collection size."""
    return like(coll, itertools.islice(coll, max(n, 0)))


def drop(coll: Iterable[T], n: int) -> Any:
    """Return all but the first n elements; n is clamped to the collection size."""
    return like(coll, itertools.islice(coll, max(n, 0), None))


def take_while(coll: Iterable[T], pred: Predicate[T]) -> Any:
    """Return the longest prefix whose elements all satisfy pred."""
    return like(coll, itertools.takewhile(pred, coll))


def drop_while(coll: Iterable[T], pred: Predicate[T]) -> Any:
    """Return what follows the longest prefix satisfying pred."""
    return like(coll, itertools.dropwhile(pred, coll))


def concat(coll1: Iterable[T], coll2: Iterable[T]) -> Any:
    """Return the elements of coll1 followed by those of coll2."""
    return like(coll1, itertools.chain(coll1, coll2))


def interleave(coll1: Iterable[T], coll2: Iterable[T]) -> Any:
    """Alternate elements of both collections, stopping at the shorter one."""
    return like(coll1, [item for pair in zip(coll1, coll2) for item in pair])


def interpose(coll: Iterable[T], sep: T) -> Any:
    """Insert sep between every adjacent pair of elements."""
    items: list[T] = []
    for index, item in enumerate(coll):
        if index:
            items.append(sep)
        items.append(item)
    return like(coll, items)
