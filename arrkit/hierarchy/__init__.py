"""
Hierarchy reconstruction from adjacency records.

This module turns a flat list of records, each naming its parent, into a tree:
1. Index every record by id (builder.build_tree, pass 1)
2. File each node as a root, an orphan or a child (builder.build_tree, pass 2)
3. Query the result without recursing into parent loops (traversal)

Main entry point: build_tree()
"""

from .builder import (
    APPEND,
    alias_of,
    build_tree,
    iter_records,
    normalize_parent,
)
from .traversal import (
    children_of,
    depth_first_preorder,
    find_cycles,
    iter_subtree,
    to_nested,
)
from .types import TreeConfig, TreeResult

__all__ = [
    # Main entry point
    "build_tree",
    # Types
    "TreeConfig",
    "TreeResult",
    # Builder helpers
    "APPEND",
    "alias_of",
    "iter_records",
    "normalize_parent",
    # Traversal
    "children_of",
    "depth_first_preorder",
    "find_cycles",
    "iter_subtree",
    "to_nested",
]
