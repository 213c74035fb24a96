"""
Type definitions shared across the collection utilities.

Records are untyped mappings: the algorithms only ever address a handful of
configured fields and carry everything else through untouched.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping, MutableMapping, Sequence
from typing import Any, Callable, Literal, TypeAlias


# Keys and records
Key: TypeAlias = Hashable
Record: TypeAlias = Mapping[str, Any]
Records: TypeAlias = Sequence[Record] | Mapping[Key, Record]

# A Node is a fresh mutable copy of a Record, possibly holding a children container
Node: TypeAlias = MutableMapping[str, Any]
Children: TypeAlias = MutableMapping[Key, Node] | list[Node]

# Field name that may be switched off with None or ""
OptionalField: TypeAlias = str | None

# Predicates accepted by satisfies_all
NamedCriteria: TypeAlias = Literal["numeric", "even", "odd"]
Criteria: TypeAlias = Callable[[Any], bool] | NamedCriteria

# Result of a group() callback: drop, group name, or (group[, key[, value]])
GroupSpec: TypeAlias = Key | tuple[Any, ...] | list[Any] | None
Grouper: TypeAlias = Callable[[Any, Key], GroupSpec]
