"""
Type definitions for tree building.

TreeConfig names the fields a Record is read through; TreeResult holds the
four views produced by build_tree.
"""

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, fields, replace
from typing import Any

from arrkit.constants import ALIAS_FIELD, CHILDREN_FIELD, ID_FIELD, PARENT_FIELD
from arrkit.localtypes import Children, Key, Node, OptionalField


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """
    Field names used to read Records and to attach children.

    Attributes:
        id_field: Field holding the record id. None or "" uses the record's
            position (or mapping key) as its id.
        parent_field: Field holding the parent id.
        alias_field: Field whose value keys a node inside roots, orphans and
            children containers. None or "" appends nodes positionally.
        children_field: Field under which a node's children are attached.
    """

    id_field: OptionalField = ID_FIELD
    parent_field: str = PARENT_FIELD
    alias_field: OptionalField = ALIAS_FIELD
    children_field: str = CHILDREN_FIELD

    @property
    def positional(self) -> bool:
        """True when nodes are appended instead of keyed by alias."""
        return not self.alias_field

    def with_overrides(self, **overrides: Any) -> "TreeConfig":
        """Copy of this configuration with some fields replaced."""
        return replace(self, **overrides)

    @classmethod
    def coerce(
        cls, config: "TreeConfig | Mapping[str, Any] | None" = None, **overrides: Any
    ) -> "TreeConfig":
        """
        Build a configuration from a TreeConfig, a partial mapping or nothing.

        Keyword overrides are applied last. Unknown field names raise TypeError.
        """
        if config is None:
            base = cls()
        elif isinstance(config, cls):
            base = config
        elif isinstance(config, Mapping):
            base = cls(**config)
        else:
            raise TypeError(f"Cannot build a TreeConfig from {type(config).__name__}")
        return base.with_overrides(**overrides) if overrides else base


@dataclass(slots=True)
class TreeResult:
    """
    The hierarchy rebuilt from a flat list of records.

    Every node reachable from roots, orphans or a children container is the
    very object stored in `all`.

    Attributes:
        all: Every node, keyed by id, in first-seen order.
        roots: Nodes without a parent.
        orphans: Nodes whose parent id matches no record.
        structure: Normalized parent id of every id, as supplied.
    """

    all: MutableMapping[Key, Node]
    roots: Children
    orphans: Children
    structure: MutableMapping[Key, Key | None]

    def as_dict(self) -> dict[str, Any]:
        """Shallow mapping view: {"all": ..., "roots": ..., ...}."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


__all__ = ["TreeConfig", "TreeResult"]
