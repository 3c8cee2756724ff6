"""Helpers for nested mappings and sequences."""

from __future__ import annotations

import copy
from typing import Any, Callable, Hashable, Iterable, Mapping, MutableMapping, Sequence

__all__ = [
    "flatten",
    "unflatten",
    "map_deep",
    "get",
    "key_exists",
    "set_value",
    "value_exists",
    "group_by",
    "interlace",
    "is_associative",
]

_CONTAINERS = (dict, list, tuple)


def _items(data: Mapping | Sequence) -> Iterable[tuple[Hashable, Any]]:
    if isinstance(data, Mapping):
        return data.items()
    return enumerate(data)


def flatten(data: Mapping | Sequence, separator: str = ".", prepend: str = "") -> dict[str, Any]:
    """Flatten nested dicts, lists and tuples into a single-level dict.

    Keys are the path to each leaf joined with ``separator``; sequence
    elements contribute their position. ``prepend`` is prefixed to every key.

    >>> flatten({"a": {"b": 1}, "c": [2, 3]})
    {'a.b': 1, 'c.0': 2, 'c.1': 3}
    """

    result: dict[str, Any] = {}
    for key, value in _items(data):
        current_key = f"{prepend}{key}"
        if isinstance(value, _CONTAINERS):
            result.update(flatten(value, separator, current_key + separator))
            continue
        result[current_key] = value
    return result


def unflatten(flat: Mapping[str, Any], separator: str = ".") -> dict[str, Any]:
    """Rebuild nested dicts from the output of :func:`flatten`."""

    result: dict[str, Any] = {}
    for path, value in flat.items():
        *parents, leaf = str(path).split(separator)
        node = result
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[leaf] = value
    return result


def map_deep(data: Any, callback: Callable[[Any], Any], _seen: set[int] | None = None) -> Any:
    """Apply ``callback`` to every leaf value of a nested structure.

    Dicts, lists and tuples are rebuilt with the same keys and the same type,
    so ``OrderedDict`` or ``defaultdict`` values stay what they were. Objects
    carrying a ``__dict__`` are updated in place and returned, so their
    identity is kept. A container or object met again while it is being
    processed is returned untouched. Strings, bytes and other objects are
    leaves.
    """

    seen = set() if _seen is None else _seen

    is_container = isinstance(data, _CONTAINERS)
    if not is_container and (not hasattr(data, "__dict__") or isinstance(data, type)):
        return callback(data)

    marker = id(data)
    if marker in seen:
        return data
    seen.add(marker)
    try:
        if isinstance(data, dict):
            mapped_items = [(key, map_deep(value, callback, seen)) for key, value in data.items()]
            result = copy.copy(data)
            result.clear()
            result.update(mapped_items)
            return result
        if isinstance(data, (list, tuple)):
            mapped = [map_deep(item, callback, seen) for item in data]
            if isinstance(data, list):
                result = copy.copy(data)
                result[:] = mapped
                return result
            if hasattr(data, "_fields"):
                # namedtuple
                return type(data)(*mapped)
            return type(data)(mapped)
        for name, value in list(vars(data).items()):
            setattr(data, name, map_deep(value, callback, seen))
        return data
    finally:
        seen.discard(marker)


def key_exists(data: Mapping | Sequence, key: Hashable) -> bool:
    """Return whether ``key`` is present in a mapping or a valid sequence index."""

    if isinstance(data, Mapping):
        return key in data
    if isinstance(key, int) and not isinstance(key, bool):
        return -len(data) <= key < len(data)
    return False


def get(data: Mapping | Sequence, key: Hashable, default: Any = None) -> Any:
    """Return ``data[key]`` when the key exists, ``default`` otherwise."""

    if key_exists(data, key):
        return data[key]  # type: ignore[index]
    return default


def set_value(data: MutableMapping | list, key: Hashable | None, value: Any) -> Any:
    """Store ``value`` under ``key`` and return the container.

    A ``None`` key replaces the whole container: ``value`` is returned and
    callers are expected to rebind their reference to it.
    """

    if key is None:
        return value
    data[key] = value  # type: ignore[index]
    return data


def value_exists(data: Mapping | Iterable, value: Any) -> bool:
    """Strict membership test: the value must be equal and of the same type."""

    values = data.values() if isinstance(data, Mapping) else data
    return any(type(item) is type(value) and item == value for item in values)


def group_by(items: Iterable[Mapping[str, Any]], key: str) -> dict[Any, list[Mapping[str, Any]]]:
    """Group mappings by the value stored under ``key``.

    Items where ``key`` is missing or ``None`` are skipped, so an unknown key
    yields an empty dict.
    """

    result: dict[Any, list[Mapping[str, Any]]] = {}
    for item in items:
        group = item.get(key)
        if group is None:
            continue
        result.setdefault(group, []).append(item)
    return result


def interlace(*sequences: Sequence[Any]) -> list[Any] | None:
    """Alternate the values of several sequences.

    >>> interlace([1, 2, 3], ["a", "b", "c"])
    [1, 'a', 2, 'b', 3, 'c']

    Shorter sequences simply stop contributing and ``None`` entries are
    skipped when several sequences are given. ``None`` is returned when no
    sequence is given.
    """

    if not sequences:
        return None
    if len(sequences) == 1:
        return list(sequences[0])

    longest = max(len(sequence) for sequence in sequences)
    return [
        sequence[index]
        for index in range(longest)
        for sequence in sequences
        if index < len(sequence) and sequence[index] is not None
    ]


def is_associative(data: Mapping | Sequence) -> bool:
    """Return whether ``data`` is keyed by something other than ``0..n-1``."""

    if not data or not isinstance(data, Mapping):
        return False
    return list(data.keys()) != list(range(len(data)))
