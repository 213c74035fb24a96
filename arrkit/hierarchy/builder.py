"""
Tree construction from adjacency records.

Rebuilds a hierarchy from a flat collection of records that each name their
parent. Two passes:
    1. Indexing: wrap every record into a node, keyed by id, and record the
       id -> parent edge in the structure map.
    2. Classification: walk the structure map in input order and file each
       node as a root, an orphan, or a child of its (existing) parent.

Nodes are shared, never copied: the node filed under a parent is the same
object as the one in `all`. Only the immediate parent is checked, so records
forming a closed parent loop end up inside each other's children and are
neither roots nor orphans.
"""

import logging
from collections.abc import Hashable, Iterator, Mapping
from typing import Any, Callable, TypeAlias

from arrkit.constants import EMPTY_PARENTS
from arrkit.exceptions import AliasConflictError
from arrkit.localtypes import Children, Key, Node, Record, Records

from .types import TreeConfig, TreeResult

logger = logging.getLogger(__name__)

# Marker alias: append instead of keying
APPEND = object()

ContainerFactory: TypeAlias = Callable[..., Any]


def normalize_parent(value: Any) -> Key | None:
    """Absent, None and "" all mean "no parent"."""
    return None if value in EMPTY_PARENTS else value


def iter_records(records: Records) -> Iterator[tuple[Key, Record]]:
    """Yields (position, record), using mapping keys as positions."""
    if isinstance(records, Mapping):
        yield from records.items()
    else:
        yield from enumerate(records)


def alias_of(node: Node, node_id: Key, config: TreeConfig) -> Any:
    """
    Key under which a node is filed in roots, orphans or a children container.

    The alias field value when present, the node id when the field is missing,
    APPEND when aliasing is switched off.

    Raises:
        TypeError: The alias value cannot be used as a key.
    """
    if config.positional:
        return APPEND
    if config.alias_field not in node:
        return node_id
    alias = node[config.alias_field]
    if not isinstance(alias, Hashable):
        raise TypeError(
            f"Unhashable alias {alias!r} in field {config.alias_field!r} "
            f"of node {node_id!r}"
        )
    return alias


def _seed_children(
    existing: Any, config: TreeConfig, make_children: ContainerFactory
) -> Children:
    """
    Fresh children container, pre-filled with the children a record already had.

    The record's own container is copied, never reused.
    """
    if not existing:
        return make_children()
    if config.positional:
        entries = existing.values() if isinstance(existing, Mapping) else existing
        return make_children(list(entries))
    if isinstance(existing, Mapping):
        return make_children(dict(existing.items()))
    return make_children(dict(enumerate(existing)))


def _store(container: Children, alias: Any, node: Node) -> None:
    if alias is APPEND:
        container.append(node)
    else:
        container[alias] = node


def build_tree(
    records: Records,
    config: TreeConfig | Mapping[str, Any] | None = None,
    *,
    container: ContainerFactory | None = None,
    **overrides: Any,
) -> TreeResult:
    """
    Builds a hierarchy from parent-referencing records.

    Args:
        records: Sequence of records, or a mapping whose keys stand in for
            positions when the id field is disabled.
        config: Full or partial configuration; defaults fill the rest.
        container: Type used for nodes and every container of the result.
            Called with a record to build a node and with no argument to build
            an empty container. Defaults to dict (and list for positional
            containers).
        **overrides: Individual configuration fields.

    Returns:
        TreeResult with `all`, `roots`, `orphans` and `structure`.

    Raises:
        AliasConflictError: Two children of one parent share an alias.
        TypeError: An alias value is unhashable; the message names the node.
    """
    config = TreeConfig.coerce(config, **overrides)

    make_node: ContainerFactory = container or dict
    make_map: ContainerFactory = container or dict
    make_children: ContainerFactory = container or (
        list if config.positional else dict
    )

    all_nodes = make_map()
    structure = make_map()
    roots = make_children()
    orphans = make_children()

    # Pass 1: index every record by id
    for position, record in iter_records(records):
        node_id = record.get(config.id_field) if config.id_field else position
        all_nodes[node_id] = make_node(record)
        structure[node_id] = normalize_parent(record.get(config.parent_field))

    # Pass 2: file every node under its parent
    with_children: set[Key] = set()
    for child_id, parent_id in structure.items():
        node = all_nodes[child_id]
        alias = alias_of(node, child_id, config)

        if parent_id is None:
            if alias is not APPEND and alias in roots:
                logger.debug(f"Root alias {alias!r} reassigned to {child_id!r}")
            _store(roots, alias, node)

        elif parent_id not in all_nodes:
            if alias is not APPEND and alias in orphans:
                logger.debug(f"Orphan alias {alias!r} reassigned to {child_id!r}")
            _store(orphans, alias, node)

        else:
            parent = all_nodes[parent_id]
            if parent_id not in with_children:
                parent[config.children_field] = _seed_children(
                    parent.get(config.children_field), config, make_children
                )
                with_children.add(parent_id)
            children = parent[config.children_field]

            if alias is not APPEND and alias in children:
                raise AliasConflictError(alias, child_id, parent_id)
            _store(children, alias, node)

    logger.debug(
        f"Built tree from {len(all_nodes)} nodes: "
        f"{len(roots)} roots, {len(orphans)} orphans, "
        f"{len(with_children)} parents"
    )

    return TreeResult(
        all=all_nodes, roots=roots, orphans=orphans, structure=structure
    )


__all__ = ["APPEND", "alias_of", "build_tree", "iter_records", "normalize_parent"]
