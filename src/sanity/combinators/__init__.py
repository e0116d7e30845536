"""Combinators - immutable operations over sequences and mappings."""

from .chain import Chain, chain
from .generate import iterate, range, repeat, repeatedly
from .mappings import (
    assoc,
    dissoc,
    get,
    has_key,
    keys,
    merge,
    merge_with,
    pairs,
    rename_keys,
    vals,
    zipmap,
)
from .sequences import (
    any,
    concat,
    conj,
    cons,
    contains,
    drop,
    drop_while,
    every,
    filter,
    first,
    index_of,
    interleave,
    interpose,
    last,
    map,
    maximum,
    minimum,
    nth,
    reduce,
    remove,
    rest,
    reverse,
    shuffle,
    sort,
    take,
    take_while,
)

__all__ = [
    # Sequences
    "first",
    "rest",
    "last",
    "map",
    "reduce",
    "minimum",
    "maximum",
    "filter",
    "remove",
    "every",
    "any",
    "contains",
    "index_of",
    "sort",
    "shuffle",
    "reverse",
    "nth",
    "cons",
    "conj",
    "take",
    "drop",
    "take_while",
    "drop_while",
    "concat",
    "interleave",
    "interpose",
    # Generators
    "range",
    "repeat",
    "repeatedly",
    "iterate",
    # Mappings
    "keys",
    "vals",
    "pairs",
    "zipmap",
    "assoc",
    "dissoc",
    "has_key",
    "get",
    "merge",
    "merge_with",
    "rename_keys",
    # Chaining
    "Chain",
    "chain",
]
