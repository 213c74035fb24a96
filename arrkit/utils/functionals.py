"""
Helpers over lists and keyed records.

Getters:
    first(values)                 - First value of a list or mapping
    last(values)                  - Last value of a list or mapping
    random_value(values, rng)     - Uniformly drawn value

Checks:
    satisfies_all(values, criteria) - Predicate or named check on every value

Reducers:
    join(mapping, rules)          - Render key/value pairs into one string
    kslice(mapping, *keys)        - Keep some keys, original order
    group(mapping, fn)            - Regroup entries by callback
    shortest(collections)         - Smallest sized item
    extract_values(rows, key)     - One field from every row

Keys:
    deprefix_keys(mapping, prefix) - Strip a prefix from keys
    reindex(rows, key)             - Re-key rows by one of their fields

Functions accept lists and mappings alike; on a list the positions act as keys.
"""

from collections.abc import Iterable, Mapping, Sequence, Sized
from numbers import Number
from typing import Any

import numpy as np

from arrkit.constants import JOIN_DEFAULTS
from arrkit.exceptions import ArrIsEmptyError
from arrkit.localtypes import Criteria, Grouper, Key


def _values(values: Iterable[Any]) -> list[Any]:
    if isinstance(values, Mapping):
        return list(values.values())
    return list(values)


def _items(values: Iterable[Any]) -> Iterable[tuple[Key, Any]]:
    if isinstance(values, Mapping):
        return values.items()
    return enumerate(values)


# =============================================================================
# Getters
# =============================================================================


def first(values: Iterable[Any]) -> Any:
    """Returns the first value, whether `values` is a list or a mapping."""
    for value in _values(values):
        return value
    raise ArrIsEmptyError("Cannot get a first value in the empty array")


def last(values: Iterable[Any]) -> Any:
    """Returns the last value, whether `values` is a list or a mapping."""
    items = _values(values)
    if not items:
        raise ArrIsEmptyError("Cannot get a last value in the empty array")
    return items[-1]


def random_value(values: Iterable[Any], rng: np.random.Generator | None = None) -> Any:
    """
    Returns a uniformly drawn value.

    Args:
        values: List or mapping to draw from.
        rng: Generator to draw with; a fresh default_rng() when omitted.
    """
    items = _values(values)
    if not items:
        raise ArrIsEmptyError("Cannot find a random value in the empty array")
    rng = rng if rng is not None else np.random.default_rng()
    return items[int(rng.integers(len(items)))]


# =============================================================================
# Checks
# =============================================================================


def is_numeric(value: Any) -> bool:
    """Numbers and numeric strings, booleans excluded."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Number):
        return True
    if isinstance(value, str):
        try:
            float(value)
        except ValueError:
            return False
        return True
    return False


def satisfies_all(values: Iterable[Any], criteria: Criteria) -> bool:
    """
    Checks that every value meets `criteria`.

    Args:
        values: List or mapping whose values are checked.
        criteria: A predicate, or one of:
            "numeric" - every value is numeric
            "even"    - every value is numeric and even
            "odd"     - every value is numeric and odd

    Raises:
        ValueError: Unknown criteria name.
    """
    items = _values(values)

    if callable(criteria):
        return all(criteria(value) for value in items)
    if criteria == "numeric":
        return all(is_numeric(value) for value in items)
    if criteria in ("even", "odd"):
        remainder = 1 if criteria == "odd" else 0
        return all(
            is_numeric(value) and int(float(value)) % 2 == remainder
            for value in items
        )
    raise ValueError(f"Unknown criteria: {criteria!r}")


# =============================================================================
# Reducers
# =============================================================================


def merge_params(
    defaults: Mapping[str, Any], params: Mapping[str, Any] | Sequence[Any]
) -> dict[str, Any]:
    """
    Fills `defaults` from `params`.

    A sequence assigns values positionally, in the order of `defaults`. A
    mapping overrides the defaults it names, ignoring empty values.
    """
    merged = dict(defaults)
    if not params:
        return merged

    if isinstance(params, Mapping):
        for name in merged:
            if params.get(name):
                merged[name] = params[name]
    else:
        for name, value in zip(merged, params):
            merged[name] = value
    return merged


def join(mapping: Mapping[Key, Any], rules: Mapping[str, Any] | Sequence[Any]) -> str:
    """
    Renders key/value pairs into a single string.

    Each pair becomes `key + key_value_glue + wrapper + value + wrapper`, and
    pairs are joined with `elements_glue`. List values are joined with
    `value_glue` first. Occurrences of the wrapper inside a value are replaced
    with `value_escape` when one is given.

    Example:
        >>> join({"class": ["a", "b"], "id": "x"}, JOIN_HTML)
        'class="a b" id="x"'
    """
    params = merge_params(JOIN_DEFAULTS, rules)
    wrapper = params["value_wrapper"]
    escape = params["value_escape"] or wrapper

    rendered = []
    for key, value in _items(mapping):
        if isinstance(value, (list, tuple)):
            value = params["value_glue"].join(str(v) for v in value)
        text = str(value)
        if wrapper:
            text = text.replace(wrapper, escape)
        rendered.append(f"{key}{params['key_value_glue']}{wrapper}{text}{wrapper}")

    return params["elements_glue"].join(rendered)


def kslice(mapping: Mapping[Key, Any], *keys: Any) -> dict[Key, Any]:
    """
    Keeps the listed keys, in the mapping's own order.

    Keys can be given as arguments or as a single list.
    """
    if len(keys) == 1 and isinstance(keys[0], (list, tuple, set, frozenset)):
        keys = tuple(keys[0])
    wanted = set(keys)
    return {k: v for k, v in _items(mapping) if k in wanted}


def group(mapping: Mapping[Key, Any], fn: Grouper) -> dict[Key, dict[Key, Any]]:
    """
    Regroups entries according to `fn(value, key)`.

    `fn` returns either:
        None                   - the entry is dropped
        group                  - entry kept with its key and value
        (group[, key[, value]]) - entry stored under a new key and/or value

    Example:
        >>> group({"a": 1, "b": 2}, lambda v, k: "odd" if v % 2 else "even")
        {'odd': {'a': 1}, 'even': {'b': 2}}
    """
    groups: dict[Key, dict[Key, Any]] = {}
    for key, value in _items(mapping):
        spec = fn(value, key)
        if spec is None:
            continue

        if isinstance(spec, (tuple, list)):
            if not spec:
                raise ValueError(f"Empty group spec for key {key!r}")
            group_name = spec[0]
            if len(spec) > 1:
                key = spec[1]
            if len(spec) > 2:
                value = spec[2]
        else:
            group_name = spec

        groups.setdefault(group_name, {})[key] = value

    return groups


def _is_countable(value: Any) -> bool:
    return isinstance(value, Sized) and not isinstance(value, (str, bytes))


def shortest(collections: Iterable[Any], first_match: bool = True) -> Any:
    """
    Returns the item with the fewest elements.

    Items without a length are ignored; None when there is nothing to compare.

    Args:
        collections: List or mapping of collections.
        first_match: On a tie keep the earliest item, else the latest.
    """
    best = None
    for candidate in _values(collections):
        if not _is_countable(candidate):
            continue
        if best is None:
            best = candidate
        elif len(candidate) < len(best) or (
            len(candidate) == len(best) and not first_match
        ):
            best = candidate
    return best


def extract_values(rows: Iterable[Any], key: Key) -> list[Any]:
    """Collects `row[key]` from every mapping row that has it."""
    return [row[key] for row in _values(rows) if isinstance(row, Mapping) and key in row]


# =============================================================================
# Keys
# =============================================================================


def deprefix_keys(
    mapping: Mapping[Key, Any], prefix: str, preserve_nonprefixed: bool = False
) -> dict[Key, Any]:
    """
    Removes `prefix` from the keys that start with it.

    Other keys are dropped, or kept unchanged with `preserve_nonprefixed`.
    """
    out: dict[Key, Any] = {}
    for key, value in _items(mapping):
        if isinstance(key, str) and key.startswith(prefix):
            out[key[len(prefix) :]] = value
        elif preserve_nonprefixed:
            out[key] = value
    return out


def reindex(rows: Iterable[Any], key: str) -> dict[Key, Any]:
    """
    Re-keys rows by one of their fields.

    Mapping rows are read by item, other objects by attribute; rows without
    the field are skipped. Later rows win on equal keys.
    """
    out: dict[Key, Any] = {}
    for row in _values(rows):
        if isinstance(row, Mapping):
            if key in row:
                out[row[key]] = row
        elif hasattr(row, key):
            out[getattr(row, key)] = row
    return out


__all__ = [
    "deprefix_keys",
    "extract_values",
    "first",
    "group",
    "is_numeric",
    "join",
    "kslice",
    "last",
    "merge_params",
    "random_value",
    "reindex",
    "satisfies_all",
    "shortest",
]
