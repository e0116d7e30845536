"""Mapping combinators: keys, vals, zipmap, assoc, dissoc, merge, ...

All results are new dicts following the insertion order of their inputs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from sanity.config import CollisionPolicy, get_config
from sanity.errors import KeyCollisionError, LengthMismatchError

from .types import K, V, as_sequence

logger = logging.getLogger(__name__)


def keys(m: Mapping[K, V]) -> list[K]:
    """Return the keys of m."""
    return list(m.keys())


def vals(m: Mapping[K, V]) -> list[V]:
    """Return the values of m, in the same order as keys(m)."""
    return list(m.values())


def pairs(m: Mapping[K, V]) -> list[tuple[K, V]]:
    """Return the (key, value) pairs of m, in the same order as keys(m)."""
    return list(m.items())


def zipmap(keys: Iterable[K], vals: Iterable[V]) -> dict[K, V]:
    """Pair keys[i] with vals[i].

    Raises:
        LengthMismatchError: If keys and vals differ in length
    """
    key_seq = as_sequence(keys)
    val_seq = as_sequence(vals)
    if len(key_seq) != len(val_seq):
        raise LengthMismatchError(len(key_seq), len(val_seq))
    return dict(zip(key_seq, val_seq))


def assoc(m: Mapping[K, V], key: K, value: V) -> dict[K, V]:
    """Return a copy of m with key bound to value."""
    result = dict(m)
    result[key] = value
    return result


def dissoc(m: Mapping[K, V], key: K, *more: K) -> dict[K, V]:
    """Return a copy of m without the given keys. Absent keys are ignored."""
    dropped = (key, *more)
    return {k: v for k, v in m.items() if k not in dropped}


def has_key(m: Mapping[K, Any], key: K) -> bool:
    return key in m


def get(m: Mapping[K, V], key: K, not_found: Any = None) -> Any:
    """Return the value bound to key, or not_found."""
    if key in m:
        return m[key]
    return not_found


def merge(m1: Mapping[K, V], m2: Mapping[K, V]) -> dict[K, V]:
    """Union of both mappings; bindings from m2 win on collision."""
    result = dict(m1)
    result.update(m2)
    return result


def merge_with(func: Callable[[V, V], V], m1: Mapping[K, V], m2: Mapping[K, V]) -> dict[K, V]:
    """Union of both mappings; colliding keys get func(m1[k], m2[k]).

    Args:
        func: Combines the value from m1 with the value from m2
        m1: Left mapping
        m2: Right mapping

    Returns:
        New dict with every key of m1 and m2
    """
    result = dict(m1)
    for key, value in m2.items():
        result[key] = func(m1[key], value) if key in m1 else value
    return result


def rename_keys(
    m: Mapping[K, V],
    kmap: Mapping[K, K],
    on_collision: CollisionPolicy | None = None,
) -> dict[K, V]:
    """Rename the keys of m found in kmap to their kmap values.

    Keys missing from kmap are kept unchanged. Two source keys landing on
    the same target key is a collision: under "last_wins" the one later in
    iteration order keeps its value, under "error" nothing is returned.

    Args:
        m: Mapping to rename
        kmap: Source key to target key
        on_collision: Collision policy, defaults to the configured one

    Returns:
        New dict with renamed keys

    Raises:
        KeyCollisionError: On collision under the "error" policy
    """
    policy = on_collision if on_collision is not None else get_config().rename_collision
    result: dict[K, V] = {}
    sources: dict[K, K] = {}
    for key, value in m.items():
        target = kmap[key] if key in kmap else key
        if target in sources:
            if policy == "error":
                raise KeyCollisionError(target, (sources[target], key))
            logger.debug("rename_keys: %r replaces %r as %r", key, sources[target], target)
        sources[target] = key
        result[target] = value
    return result
