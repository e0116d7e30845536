from . import rng
from .combinators import (
    Chain,
    any,
    assoc,
    chain,
    concat,
    conj,
    cons,
    contains,
    dissoc,
    drop,
    drop_while,
    every,
    filter,
    first,
    get,
    has_key,
    index_of,
    interleave,
    interpose,
    iterate,
    keys,
    last,
    map,
    maximum,
    merge,
    merge_with,
    minimum,
    nth,
    pairs,
    range,
    reduce,
    remove,
    rename_keys,
    repeat,
    repeatedly,
    rest,
    reverse,
    shuffle,
    sort,
    take,
    take_while,
    vals,
    zipmap,
)
from .config import SanityConfig, configure, get_config
from .errors import (
    EmptyCollectionError,
    IndexOutOfRangeError,
    KeyCollisionError,
    LengthMismatchError,
    SanityError,
)

__version__ = "0.1.0"

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
    # Errors
    "SanityError",
    "EmptyCollectionError",
    "IndexOutOfRangeError",
    "LengthMismatchError",
    "KeyCollisionError",
    # Configuration
    "SanityConfig",
    "configure",
    "get_config",
    "rng",
]
