"""Fluent wrapper threading a collection through combinators."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from . import mappings, sequences

T = TypeVar("T")

# Operation registry - names resolvable as Chain methods
_extensions_registry: dict[str, Callable[..., Any]] = {}


@dataclass(frozen=True)
class Chain(Generic[T]):
    """Immutable wrapper around a collection.

    Every registered operation is available as a method taking the wrapped
    value as its first argument and returning a new Chain. Read the result
    with .value.

        chain([3, 1, 2]).sort().map(str).value  # ['1', '2', '3']
    """

    value: T

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register an operation as a Chain method.

        Args:
            name: The method name (e.g., "take")
            fn: Function receiving the wrapped value first
        """
        _extensions_registry[name] = fn

    def __getattr__(self, name: str) -> Any:
        """Resolve registered operations."""
        if name in _extensions_registry:
            fn = _extensions_registry[name]
            return lambda *args, **kwargs: Chain(fn(self.value, *args, **kwargs))
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def then(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Chain[Any]:
        """Apply an unregistered function to the wrapped value."""
        return Chain(func(self.value, *args, **kwargs))


def chain(value: T) -> Chain[T]:
    """Start a chain over value."""
    return Chain(value)


def _reduce(coll: Any, func: Callable[..., Any], *init: Any) -> Any:
    return sequences.reduce(*init, coll, func)


def _merge_with(m: Any, func: Callable[..., Any], other: Any) -> Any:
    return mappings.merge_with(func, m, other)


for _name in (
    "first", "rest", "last", "map", "minimum", "maximum", "filter", "remove",
    "every", "any", "contains", "index_of", "sort", "shuffle", "reverse", "nth",
    "cons", "conj", "take", "drop", "take_while", "drop_while", "concat",
    "interleave", "interpose",
):
    Chain.register_op(_name, getattr(sequences, _name))

for _name in (
    "keys", "vals", "pairs", "assoc", "dissoc", "has_key", "get", "merge", "rename_keys",
):
    Chain.register_op(_name, getattr(mappings, _name))

del _name

Chain.register_op("reduce", _reduce)
Chain.register_op("merge_with", _merge_with)
