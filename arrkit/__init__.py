"""
Collection utilities for lists and keyed records.

Algorithms:
    build_tree(records, config)  - Rebuild a hierarchy from parent-referencing records
    find_overlap(a, b)           - Rightmost suffix/prefix alignment of two sequences

Container:
    Arr                          - Ordered keyed container with array semantics

The smaller helpers (first, last, join, group, ...) live in arrkit.utils.functionals.
"""

from .constants import JOIN_CSS, JOIN_HTML
from .container import Arr
from .exceptions import AliasConflictError, ArrError, ArrIsEmptyError
from .hierarchy import (
    TreeConfig,
    TreeResult,
    build_tree,
    find_cycles,
    iter_subtree,
    to_nested,
)
from .sequence import Overlap, find_overlap
from .utils.functionals import (
    deprefix_keys,
    extract_values,
    first,
    group,
    join,
    kslice,
    last,
    random_value,
    reindex,
    satisfies_all,
    shortest,
)

__all__ = [
    # Algorithms
    "build_tree",
    "find_overlap",
    "TreeConfig",
    "TreeResult",
    "Overlap",
    # Tree queries
    "find_cycles",
    "iter_subtree",
    "to_nested",
    # Container
    "Arr",
    # Helpers
    "deprefix_keys",
    "extract_values",
    "first",
    "group",
    "join",
    "kslice",
    "last",
    "random_value",
    "reindex",
    "satisfies_all",
    "shortest",
    "JOIN_CSS",
    "JOIN_HTML",
    # Errors
    "ArrError",
    "ArrIsEmptyError",
    "AliasConflictError",
]
