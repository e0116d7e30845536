"""Sequence generators: range, repeat, repeatedly, iterate."""

from __future__ import annotations

import builtins
from collections.abc import Callable
from typing import Any, overload

from .types import T

Number = int | float


@overload
def range(end: Number, /) -> list[Any]:
    ...


@overload
def range(start: Number, end: Number, /) -> list[Any]:
    ...


@overload
def range(start: Number, end: Number, step: Number, /) -> list[Any]:
    ...


def range(*args: Number) -> list[Any]:
    """Return an arithmetic progression as a list.

    range(end) counts from 0, range(start, end) steps by 1 and
    range(start, end, step) accepts any non-zero int or float step.
    Element i is start + i * step, so floats do not accumulate drift.
    The progression stops before reaching end in the direction of step.

    Raises:
        ValueError: If step is zero
        TypeError: If called with anything but 1 to 3 positional arguments
    """
    if len(args) == 1:
        start, end, step = 0, args[0], 1
    elif len(args) == 2:
        (start, end), step = args, 1
    elif len(args) == 3:
        start, end, step = args
    else:
        raise TypeError(f"range() takes 1 to 3 positional arguments but {len(args)} were given")

    if step == 0:
        raise ValueError("range() step must not be zero")

    result: list[Any] = []
    index = 0
    value = start + index * step
    while (value < end) if step > 0 else (value > end):
        result.append(value)
        index += 1
        value = start + index * step
    return result


def repeat(item: T, n: int) -> list[T]:
    """Return a list holding item n times."""
    return [item] * max(n, 0)


def repeatedly(n: int, func: Callable[[], T]) -> list[T]:
    """Call func n times and collect the results in call order.

    func usually has side effects, so the values may differ.
    """
    return [func() for _ in builtins.range(max(n, 0))]


def iterate(n: int, func: Callable[[T], T], seed: T) -> list[T]:
    """Return [seed, func(seed), func(func(seed)), ...] with n elements."""
    result: list[T] = []
    value = seed
    for index in builtins.range(max(n, 0)):
        if index:
            value = func(value)
        result.append(value)
    return result
