"""Helpers for dictionaries: keys, values, filtering, conversion and merging."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")


def _new_like(mapping: Mapping[Any, Any]) -> dict[Any, Any]:
    """Return an empty dict of the same type as ``mapping`` where possible."""
    if isinstance(mapping, dict) and type(mapping) is not dict:
        try:
            return type(mapping)()
        except TypeError:
            return {}
    return {}


def keys(*args: Mapping[K, Any]) -> list[K]:
    """Return the keys of all given mappings, duplicates included."""
    return [key for mapping in args for key in mapping]


def uniq_keys(*args: Mapping[K, Any]) -> list[K]:
    """Return the distinct keys of all given mappings, in first-seen order."""
    return list(dict.fromkeys(keys(*args)))


def has_key(mapping: Mapping[K, Any], key: K) -> bool:
    """Return whether ``key`` is present."""
    return key in mapping


def values(*args: Mapping[Any, V]) -> list[V]:
    """Return the values of all given mappings, duplicates included."""
    return [value for mapping in args for value in mapping.values()]


def uniq_values(*args: Mapping[Any, V]) -> list[V]:
    """Return the distinct values of all given mappings, in first-seen order."""
    return list(dict.fromkeys(values(*args)))


def value_or(mapping: Mapping[K, V], key: K, fallback: V) -> V:
    """Return the value for ``key`` or ``fallback`` when absent."""
    return mapping[key] if key in mapping else fallback


def pick_by(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    """Return the entries for which ``predicate(key, value)`` is true."""
    result = _new_like(mapping)
    result.update((k, v) for k, v in mapping.items() if predicate(k, v))
    return result


def pick_by_keys(mapping: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Return the entries whose key is among ``keys``."""
    result = _new_like(mapping)
    result.update((k, mapping[k]) for k in keys if k in mapping)
    return result


def pick_by_values(mapping: Mapping[K, V], values: Iterable[V]) -> dict[K, V]:
    """Return the entries whose value is among ``values``."""
    wanted = list(values)
    return pick_by(mapping, lambda _, v: v in wanted)


def omit_by(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> dict[K, V]:
    """Return the entries for which ``predicate(key, value)`` is false."""
    return pick_by(mapping, lambda k, v: not predicate(k, v))


def omit_by_keys(mapping: Mapping[K, V], keys: Iterable[K]) -> dict[K, V]:
    """Return the entries whose key is not among ``keys``."""
    unwanted = set(keys)
    return pick_by(mapping, lambda k, _: k not in unwanted)


def omit_by_values(mapping: Mapping[K, V], values: Iterable[V]) -> dict[K, V]:
    """Return the entries whose value is not among ``values``."""
    unwanted = list(values)
    return pick_by(mapping, lambda _, v: v not in unwanted)


def entries(mapping: Mapping[K, V]) -> list[tuple[K, V]]:
    """Return the (key, value) pairs of ``mapping``."""
    return list(mapping.items())


def to_pairs(mapping: Mapping[K, V]) -> list[tuple[K, V]]:
    """Alias of :func:`entries`."""
    return entries(mapping)


def from_entries(entries: Iterable[tuple[K, V]]) -> dict[K, V]:
    """Build a dict from (key, value) pairs; later pairs win."""
    return dict(entries)


def from_pairs(entries: Iterable[tuple[K, V]]) -> dict[K, V]:
    """Alias of :func:`from_entries`."""
    return from_entries(entries)


def invert(mapping: Mapping[K, Hashable]) -> dict[Hashable, K]:
    """Swap keys and values; for repeated values the last key wins."""
    return {v: k for k, v in mapping.items()}


def assign(*args: Mapping[K, V]) -> dict[K, V]:
    """Merge the given mappings from left to right."""
    result = _new_like(args[0]) if args else {}
    for mapping in args:
        result.update(mapping)
    return result


def chunk_entries(mapping: Mapping[K, V], size: int) -> list[dict[K, V]]:
    """Split ``mapping`` into dicts of at most ``size`` entries.

    Raises ValueError when ``size`` is not positive.
    """
    if size <= 0:
        raise ValueError("The chunk size must be greater than 0")
    chunks: list[dict[K, V]] = []
    for key, value in mapping.items():
        if not chunks or len(chunks[-1]) == size:
            chunks.append({})
        chunks[-1][key] = value
    return chunks


def map_keys(mapping: Mapping[K, V], iteratee: Callable[[V, K], R]) -> dict[R, V]:
    """Return a dict whose keys are ``iteratee(value, key)``."""
    return {iteratee(v, k): v for k, v in mapping.items()}


def map_values(mapping: Mapping[K, V], iteratee: Callable[[V, K], R]) -> dict[K, R]:
    """Return a dict whose values are ``iteratee(value, key)``."""
    return {k: iteratee(v, k) for k, v in mapping.items()}


def map_entries(
    mapping: Mapping[K, V], iteratee: Callable[[K, V], tuple[Any, Any]]
) -> dict[Any, Any]:
    """Return a dict built from the pairs ``iteratee(key, value)``."""
    return dict(iteratee(k, v) for k, v in mapping.items())


def map_to_slice(mapping: Mapping[K, V], iteratee: Callable[[K, V], R]) -> list[R]:
    """Return ``iteratee(key, value)`` for every entry."""
    return [iteratee(k, v) for k, v in mapping.items()]