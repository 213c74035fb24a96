"""
Ordered keyed container with array semantics.

Arr keeps integer and other keys side by side, in insertion order. Appending
assigns the next integer key (one past the largest integer key, or 0), like a
list that can also carry named entries.

Every helper of arrkit.utils.functionals is available as a method; methods
that produce a collection return a new Arr.

Example:
    >>> arr = Arr([1, 2])
    >>> arr.push(3)
    3
    >>> arr.map(lambda v: v * v).copy()
    {0: 1, 1: 4, 2: 9}
"""

from collections.abc import Iterable, Iterator, Mapping, MutableMapping, Sequence
from typing import Any

import numpy as np
from typing_extensions import Self

from arrkit.hierarchy import TreeConfig, TreeResult, build_tree
from arrkit.localtypes import Criteria, Grouper, Key
from arrkit.sequence import find_overlap
from arrkit.utils import functionals


def _is_index(key: Any) -> bool:
    """Integer keys take part in auto-indexing; bools do not."""
    return isinstance(key, int) and not isinstance(key, bool)


class Arr(MutableMapping[Key, Any]):
    """
    Mapping whose integer keys behave like list positions.

    Construction:
        Arr()                  - empty
        Arr({"a": 1, 0: 2})    - keys kept
        Arr([10, 20])          - keys 0 and 1
    """

    def __init__(self, data: Mapping[Key, Any] | Iterable[Any] | None = None) -> None:
        if data is None:
            storage: dict[Key, Any] = {}
        elif isinstance(data, Mapping):
            storage = dict(data.items())
        else:
            storage = dict(enumerate(data))
        self._reset(storage)

    # Mapping protocol
    def __getitem__(self, key: Key) -> Any:
        return self._storage[key]

    def __setitem__(self, key: Key, value: Any) -> None:
        self._storage[key] = value
        if _is_index(key) and key >= self._next:
            self._next = key + 1

    def __delitem__(self, key: Key) -> None:
        del self._storage[key]
        if _is_index(key) and key == self._next - 1:
            self._next = self._scan_next()

    def __iter__(self) -> Iterator[Key]:
        return iter(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._storage!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Arr):
            return self._storage == other._storage
        if isinstance(other, Mapping):
            return self._storage == dict(other.items())
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> dict[Key, Any]:
        """Plain dict copy of the storage."""
        return dict(self._storage)

    def _scan_next(self) -> int:
        indices = [k for k in self._storage if _is_index(k)]
        return max(indices) + 1 if indices else 0

    def _reset(self, storage: dict[Key, Any]) -> None:
        self._storage = storage
        self._next = self._scan_next()

    def _renumbered(self, entries: Iterable[tuple[Key, Any]]) -> dict[Key, Any]:
        """Integer keys renumbered from 0, other keys kept."""
        out: dict[Key, Any] = {}
        index = 0
        for key, value in entries:
            if _is_index(key):
                out[index] = value
                index += 1
            else:
                out[key] = value
        return out

    # =========================================================================
    # Basic
    # =========================================================================

    def append(self, value: Any) -> None:
        self._storage[self._next] = value
        self._next += 1

    def push(self, value: Any) -> int:
        """Appends `value`, returns the new length."""
        self.append(value)
        return len(self)

    def pop(self, *args: Any) -> Any:
        """
        Without arguments, removes and returns the last value.

        With a key (and optional default), behaves like dict.pop.
        """
        if args:
            key = args[0]
            if key not in self._storage:
                return self._storage.pop(*args)
        elif not self._storage:
            return None
        else:
            key = next(reversed(self._storage))
        value = self._storage[key]
        del self[key]
        return value

    def shift(self) -> Any:
        """Removes and returns the first value; integer keys are renumbered."""
        if not self._storage:
            return None
        entries = iter(self._storage.items())
        _, value = next(entries)
        self._reset(self._renumbered(entries))
        return value

    def unshift(self, value: Any) -> int:
        """Prepends `value`, returns the new length; integer keys are renumbered."""
        self._reset(self._renumbered([(0, value), *self._storage.items()]))
        return len(self)

    def keys_arr(self) -> Self:
        """Keys as a new Arr indexed from 0."""
        return self.__class__(self._storage.keys())

    def values_arr(self) -> Self:
        """Values as a new Arr indexed from 0."""
        return self.__class__(self._storage.values())

    def map(self, fn: Any) -> Self:
        """New Arr with `fn` applied to every value, keys kept."""
        return self.__class__({k: fn(v) for k, v in self._storage.items()})

    def has_key(self, key: Key) -> bool:
        return key in self._storage

    def has(self, value: Any) -> bool:
        return any(v == value for v in self._storage.values())

    def is_empty(self) -> bool:
        return not self._storage

    # =========================================================================
    # Helpers
    # =========================================================================

    def first(self) -> Any:
        return functionals.first(self._storage)

    def last(self) -> Any:
        return functionals.last(self._storage)

    def all(self, criteria: Criteria) -> bool:
        return functionals.satisfies_all(self._storage, criteria)

    def random_value(self, rng: np.random.Generator | None = None) -> Any:
        return functionals.random_value(self._storage, rng)

    def join(self, rules: Mapping[str, Any] | Sequence[Any]) -> str:
        return functionals.join(self._storage, rules)

    def kslice(self, *keys: Any) -> Self:
        return self.__class__(functionals.kslice(self._storage, *keys))

    def group(self, fn: Grouper) -> Self:
        return self.__class__(functionals.group(self._storage, fn))

    def deprefix_keys(self, prefix: str, preserve_nonprefixed: bool = False) -> Self:
        return self.__class__(
            functionals.deprefix_keys(self._storage, prefix, preserve_nonprefixed)
        )

    def shortest(self, first_match: bool = True) -> Any:
        """Shortest item, wrapped into an Arr unless it already is one."""
        found = functionals.shortest(self._storage, first_match)
        if found is None or isinstance(found, Arr):
            return found
        return self.__class__(found)

    def extract_values(self, key: Key) -> Self:
        return self.__class__(functionals.extract_values(self._storage, key))

    def reindex(self, key: str) -> Self:
        return self.__class__(functionals.reindex(self._storage, key))

    # =========================================================================
    # Algorithms
    # =========================================================================

    def as_tree(
        self, config: TreeConfig | Mapping[str, Any] | None = None, **overrides: Any
    ) -> TreeResult:
        """build_tree over the values, with Arr nodes and containers."""
        return build_tree(self._storage, config, container=self.__class__, **overrides)

    def intersection_offset(self, other: Iterable[Any]) -> Self | None:
        """
        find_overlap between this Arr's values and `other`.

        Returns Arr({"start": ..., "end": ...}) or None.
        """
        theirs = list(other.values()) if isinstance(other, Mapping) else list(other)
        overlap = find_overlap(list(self._storage.values()), theirs)
        if overlap is None:
            return None
        return self.__class__({"start": overlap.start, "end": overlap.end})


__all__ = ["Arr"]
