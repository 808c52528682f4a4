"""Searching helpers: lookups, extremes, uniqueness and random sampling."""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from datetime import datetime
from operator import itemgetter
from typing import Any, TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

RandomInt = Callable[[int], int]


def _random_int(n: int) -> int:
    """Return a random integer in the range [0, n)."""
    return random.randrange(n)


def _same_kind(collection: Iterable[Any], items: list[Any]) -> Any:
    """Build a result of the same sequence type as ``collection`` where possible."""
    if isinstance(collection, (list, tuple)) and type(collection) not in (list, tuple):
        try:
            return type(collection)(items)
        except TypeError:
            return items
    if isinstance(collection, tuple):
        return tuple(items)
    return items


def index_of(collection: Sequence[T], element: T) -> int:
    """Return the index of the first occurrence of ``element``, or -1."""
    return next((i for i, item in enumerate(collection) if item == element), -1)


def last_index_of(collection: Sequence[T], element: T) -> int:
    """Return the index of the last occurrence of ``element``, or -1."""
    for i in reversed(range(len(collection))):
        if collection[i] == element:
            return i
    return -1


def find(collection: Iterable[T], predicate: Callable[[T], bool]) -> tuple[T | None, bool]:
    """Return the first item matching ``predicate`` and whether one was found."""
    for item in collection:
        if predicate(item):
            return item, True
    return None, False


def find_index_of(
    collection: Iterable[T], predicate: Callable[[T], bool]
) -> tuple[T | None, int, bool]:
    """Return the first matching item, its index and whether it was found."""
    for i, item in enumerate(collection):
        if predicate(item):
            return item, i, True
    return None, -1, False


def find_last_index_of(
    collection: Sequence[T], predicate: Callable[[T], bool]
) -> tuple[T | None, int, bool]:
    """Return the last matching item, its index and whether it was found."""
    for i in reversed(range(len(collection))):
        item = collection[i]
        if predicate(item):
            return item, i, True
    return None, -1, False


def find_or_else(collection: Iterable[T], fallback: T, predicate: Callable[[T], bool]) -> T:
    """Return the first item matching ``predicate`` or ``fallback``."""
    return next((item for item in collection if predicate(item)), fallback)


def find_key(mapping: Mapping[K, V], value: V) -> tuple[K | None, bool]:
    """Return the first key whose value equals ``value``."""
    for key, item in mapping.items():
        if item == value:
            return key, True
    return None, False


def find_key_by(
    mapping: Mapping[K, V], predicate: Callable[[K, V], bool]
) -> tuple[K | None, bool]:
    """Return the first key for which ``predicate(key, value)`` is true."""
    for key, item in mapping.items():
        if predicate(key, item):
            return key, True
    return None, False


def find_uniques(collection: Iterable[Hashable]) -> Any:
    """Return the items that occur exactly once, in their original order."""
    items = list(collection)
    counts = Counter(items)
    return _same_kind(collection, [item for item in items if counts[item] == 1])


def find_uniques_by(collection: Iterable[T], iteratee: Callable[[T], Hashable]) -> Any:
    """Return the items whose key occurs exactly once, in their original order."""
    items = list(collection)
    keyed = [(iteratee(item), item) for item in items]
    counts = Counter(key for key, _ in keyed)
    return _same_kind(collection, [item for key, item in keyed if counts[key] == 1])


def find_duplicates(collection: Iterable[Hashable]) -> Any:
    """Return the first occurrence of each repeated item, in order of appearance."""
    return find_duplicates_by(collection, lambda item: item)


def find_duplicates_by(collection: Iterable[T], iteratee: Callable[[T], Hashable]) -> Any:
    """Return the first item of each repeated key, in order of appearance."""
    items = list(collection)
    keyed = [(iteratee(item), item) for item in items]
    counts = Counter(key for key, _ in keyed)
    emitted: set[Hashable] = set()
    result = []
    for key, item in keyed:
        if counts[key] > 1 and key not in emitted:
            emitted.add(key)
            result.append(item)
    return _same_kind(collection, result)


def min_(collection: Iterable[T]) -> T | None:
    """Return the smallest item, or None for an empty collection."""
    return min(collection, default=None)


def min_index(collection: Iterable[T]) -> tuple[T | None, int]:
    """Return the smallest item and its index, or (None, -1) when empty."""
    found = min(enumerate(collection), key=itemgetter(1), default=None)
    if found is None:
        return None, -1
    index, item = found
    return item, index


def min_index_by(
    collection: Iterable[T], comparison: Callable[[T, T], bool]
) -> tuple[T | None, int]:
    """Return the minimum under ``comparison(item, current)`` and its index."""
    best: T | None = None
    best_index = -1
    for i, item in enumerate(collection):
        if best_index < 0 or comparison(item, best):  # type: ignore[arg-type]
            best, best_index = item, i
    return best, best_index


def min_by(collection: Iterable[T], comparison: Callable[[T, T], bool]) -> T | None:
    """Return the minimum under ``comparison(item, current)``; the first one wins ties."""
    return min_index_by(collection, comparison)[0]


def earliest(*args: datetime) -> datetime | None:
    """Return the earliest of the given times, or None when none are given."""
    return min(args, default=None)


def earliest_by(collection: Iterable[T], iteratee: Callable[[T], datetime]) -> T | None:
    """Return the item whose time from ``iteratee`` is the earliest."""
    return min(collection, key=iteratee, default=None)


def max_(collection: Iterable[T]) -> T | None:
    """Return the greatest item, or None for an empty collection."""
    return max(collection, default=None)


def max_index(collection: Iterable[T]) -> tuple[T | None, int]:
    """Return the greatest item and its index, or (None, -1) when empty."""
    found = max(enumerate(collection), key=itemgetter(1), default=None)
    if found is None:
        return None, -1
    index, item = found
    return item, index


def max_index_by(
    collection: Iterable[T], comparison: Callable[[T, T], bool]
) -> tuple[T | None, int]:
    """Return the maximum under ``comparison(item, current)`` and its index."""
    return min_index_by(collection, comparison)


def max_by(collection: Iterable[T], comparison: Callable[[T, T], bool]) -> T | None:
    """Return the maximum under ``comparison(item, current)``; the first one wins ties."""
    return max_index_by(collection, comparison)[0]


def latest(*args: datetime) -> datetime | None:
    """Return the latest of the given times, or None when none are given."""
    return max(args, default=None)


def latest_by(collection: Iterable[T], iteratee: Callable[[T], datetime]) -> T | None:
    """Return the item whose time from ``iteratee`` is the latest."""
    return max(collection, key=iteratee, default=None)


def first(collection: Sequence[T]) -> tuple[T | None, bool]:
    """Return the first item and whether the collection was non-empty."""
    if not collection:
        return None, False
    return collection[0], True


def first_or_empty(collection: Sequence[T]) -> T | None:
    """Return the first item or None."""
    return first(collection)[0]


def first_or(collection: Sequence[T], fallback: T) -> T:
    """Return the first item or ``fallback``."""
    return collection[0] if collection else fallback


def last(collection: Sequence[T]) -> tuple[T | None, bool]:
    """Return the last item and whether the collection was non-empty."""
    if not collection:
        return None, False
    return collection[-1], True


def last_or_empty(collection: Sequence[T]) -> T | None:
    """Return the last item or None."""
    return last(collection)[0]


def last_or(collection: Sequence[T], fallback: T) -> T:
    """Return the last item or ``fallback``."""
    return collection[-1] if collection else fallback


def nth(collection: Sequence[T], n: int) -> T:
    """Return the item at ``n``; negative values count from the end.

    Raises IndexError when ``n`` is out of bounds.
    """
    n = int(n)
    size = len(collection)
    if n >= size or -n > size:
        raise IndexError(f"nth: {n} out of slice bounds")
    return collection[n]


def sample(collection: Sequence[T]) -> T | None:
    """Return a random item, or None for an empty collection."""
    return sample_by(collection, _random_int)


def sample_by(collection: Sequence[T], random_int: RandomInt) -> T | None:
    """Return a random item chosen with ``random_int(n)``, which yields [0, n)."""
    if not collection:
        return None
    return collection[random_int(len(collection))]


def samples(collection: Sequence[T], count: int) -> Any:
    """Return up to ``count`` distinct random items."""
    return samples_by(collection, count, _random_int)


def samples_by(collection: Sequence[T], count: int, random_int: RandomInt) -> Any:
    """Return up to ``count`` distinct random items chosen with ``random_int``."""
    pool = list(collection)
    results = []
    for _ in range(min(len(pool), max(count, 0))):
        index = random_int(len(pool))
        results.append(pool[index])
        pool[index] = pool[-1]
        pool.pop()
    return _same_kind(collection, results)