r"""
'    .__                        ________
'    |  | _____  ___________.__.\_____  \
'    |  | \__  \ \___   <   |  | /  / \  \
'    |  |__/ __ \_/    / \___  |/   \_/.  \
'    |____(____  /_____ \/ ____|\_____\ \_/
'              \/      \/\/            \__>
"""

# expose the normalizer and the composition engine
from .source import iter, classify, is_rereadable
from .pipeline import pipe, compose, pipe_debug, log_step

# expose the operators
from .extensions.core import (
    map,
    filter,
    remove,
    take,
    drop,
    drop_while,
    tap,
    interpose,
    first,
    second,
    ffirst
)
from .extensions.zip import zip, interleave
from .extensions.utility import flatten, cycle, is_nestable
from .extensions.ordering import sort, sort_by, num_compare, str_compare, default_compare
from .extensions.grouping import group_by, frequencies
from .extensions.terminal import (
    reduce,
    every,
    some,
    into_list,
    into_set,
    into_dict,
    into_obj,
    into_ndarray,
    into_series,
    into_frame
)

# expose the infinite and generated sources
from .factories import iterate, repeatedly, repeat, from_range

# expose small helpers and supporting types
from .helpers import inc, dec, zero, pos, neg, update_entry
from .types import SourceKind, Replay

# define what `import *` does
__all__ = [
    "iter",
    "classify",
    "is_rereadable",
    "pipe",
    "compose",
    "pipe_debug",
    "log_step",
    "map",
    "filter",
    "remove",
    "take",
    "drop",
    "drop_while",
    "tap",
    "interpose",
    "first",
    "second",
    "ffirst",
    "zip",
    "interleave",
    "flatten",
    "cycle",
    "is_nestable",
    "sort",
    "sort_by",
    "num_compare",
    "str_compare",
    "default_compare",
    "group_by",
    "frequencies",
    "reduce",
    "every",
    "some",
    "into_list",
    "into_set",
    "into_dict",
    "into_obj",
    "into_ndarray",
    "into_series",
    "into_frame",
    "iterate",
    "repeatedly",
    "repeat",
    "from_range",
    "inc",
    "dec",
    "zero",
    "pos",
    "neg",
    "update_entry",
    "SourceKind",
    "Replay"
]
