"""
Queries over built trees.

Traversals:
    depth_first_preorder(after, root) - DFS yielding parent before children,
                                        each node once
    iter_subtree(node, children_field) - Preorder walk of a built node

Structure queries:
    find_cycles(structure) - Groups of ids whose parent chains loop

Detaching:
    to_nested(node, children_field) - Plain nested copy, refusing cycles

build_tree never checks ancestry, so a result may contain parent loops. Every
function here terminates on such results.
"""

from collections.abc import Iterator, Mapping
from typing import Any, Callable, TypeVar

from arrkit.constants import CHILDREN_FIELD
from arrkit.localtypes import Key, Node

T = TypeVar("T")


def depth_first_preorder(
    after: Callable[[T], Iterator[T]], root: T | None
) -> Iterator[T]:
    """Yields parent before children, depth-first, skipping revisits."""
    if root is None:
        return
    seen: set[int] = set()
    stack = [root]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        children = list(after(current))
        stack.extend(reversed(children))


def children_of(node: Node, children_field: str = CHILDREN_FIELD) -> Iterator[Node]:
    """Iterates over a node's children, keyed or positional."""
    children = node.get(children_field)
    if not children:
        return iter(())
    if isinstance(children, Mapping):
        return iter(children.values())
    return iter(children)


def iter_subtree(node: Node, children_field: str = CHILDREN_FIELD) -> Iterator[Node]:
    """Yields a node and all its descendants, each exactly once."""
    return depth_first_preorder(
        lambda current: children_of(current, children_field), node
    )


def find_cycles(structure: Mapping[Key, Key | None]) -> tuple[tuple[Key, ...], ...]:
    """
    Finds the ids whose parent chains loop back onto themselves.

    Each id has at most one parent, so every loop is a simple cycle. Ids that
    merely descend from a loop are not part of it.

    Args:
        structure: id -> parent id, as in TreeResult.structure.

    Returns:
        One tuple per cycle, ordered as the ids first appear in `structure`,
        each starting at the first member reached.
    """
    done: set[Key] = set()
    cycles: list[tuple[Key, ...]] = []

    for start in structure:
        if start in done:
            continue

        # Follow parents until a root, an unknown id, or a visited id
        path: list[Key] = []
        on_path: dict[Key, int] = {}
        current: Key | None = start
        while current is not None and current in structure and current not in done:
            if current in on_path:
                cycles.append(tuple(path[on_path[current] :]))
                break
            on_path[current] = len(path)
            path.append(current)
            current = structure[current]

        done.update(path)

    return tuple(cycles)


def to_nested(node: Node, children_field: str = CHILDREN_FIELD) -> dict[str, Any]:
    """
    Copies a subtree into plain dicts and lists.

    Raises:
        ValueError: If the subtree contains a cycle.
    """
    ancestors: set[int] = set()

    def copy(current: Node) -> dict[str, Any]:
        if id(current) in ancestors:
            raise ValueError("Subtree contains a cycle")
        ancestors.add(id(current))

        out = {k: v for k, v in current.items() if k != children_field}
        if children_field in current:
            children = current[children_field]
            if isinstance(children, Mapping):
                out[children_field] = {
                    alias: copy(child) for alias, child in children.items()
                }
            else:
                out[children_field] = [copy(child) for child in children]

        ancestors.discard(id(current))
        return out

    return copy(node)


__all__ = [
    "children_of",
    "depth_first_preorder",
    "find_cycles",
    "iter_subtree",
    "to_nested",
]
