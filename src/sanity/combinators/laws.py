"""Combinator laws as executable predicates.

The combinators satisfy the following algebraic laws:

1. Split: concat(take(s, n), drop(s, n)) == s for 0 <= n <= len(s)
2. Projection keeps shape: len(map(s, f)) == len(s)
3. Partition: filter(s, p) and remove(s, p) split s by position
4. Sort is idempotent: sort(sort(s)) == sort(s)
5. Reverse is an involution: reverse(reverse(s)) == s
6. Zip round trip: zipmap(keys(m), vals(m)) == m
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .mappings import keys, vals, zipmap
from .sequences import concat, drop, filter, map, remove, reverse, sort, take


def take_drop_reconstructs(s: Sequence[Any], n: int) -> bool:
    return concat(take(s, n), drop(s, n)) == s


def map_preserves_length(s: Sequence[Any], f: Callable[[Any], Any]) -> bool:
    return len(map(s, f)) == len(s)


def filter_remove_partition(s: Sequence[Any], pred: Callable[[Any], Any]) -> bool:
    """Merging kept and removed positions back in index order gives s."""
    indexed = list(enumerate(s))
    kept = filter(indexed, lambda entry: pred(entry[1]))
    dropped = remove(indexed, lambda entry: pred(entry[1]))
    merged = sort(concat(kept, dropped), key=lambda entry: entry[0])
    return [item for _, item in merged] == list(s)


def sort_is_idempotent(s: Sequence[Any]) -> bool:
    once = sort(s)
    return sort(once) == once


def reverse_is_involution(s: Sequence[Any]) -> bool:
    return reverse(reverse(s)) == s


def zipmap_reconstructs(m: Mapping[Any, Any]) -> bool:
    return zipmap(keys(m), vals(m)) == dict(m)
