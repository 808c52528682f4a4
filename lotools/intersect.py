"""Membership, set-like and exclusion helpers over sequences."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

from .find import _same_kind

T = TypeVar("T")


def contains(collection: Iterable[T], element: T) -> bool:
    """Return True if ``element`` is present in ``collection``."""
    return any(item == element for item in collection)


def contains_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if ``predicate`` holds for at least one item."""
    return any(predicate(item) for item in collection)


def every(collection: Iterable[T], subset: Iterable[T]) -> bool:
    """Return True if every item of ``subset`` is in ``collection`` (True when empty)."""
    items = list(collection)
    return all(contains(items, element) for element in subset)


def every_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if ``predicate`` holds for every item (True when empty)."""
    return all(predicate(item) for item in collection)


def some(collection: Iterable[T], subset: Iterable[T]) -> bool:
    """Return True if at least one item of ``subset`` is in ``collection``."""
    items = list(collection)
    return any(contains(items, element) for element in subset)


def some_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if ``predicate`` holds for any item (False when empty)."""
    return any(predicate(item) for item in collection)


def none(collection: Iterable[T], subset: Iterable[T]) -> bool:
    """Return True if no item of ``subset`` is in ``collection`` (True when empty)."""
    return not some(collection, subset)


def none_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return True if ``predicate`` holds for no item (True when empty)."""
    return not some_by(collection, predicate)


def intersect(list1: Iterable[Hashable], list2: Iterable[Hashable]) -> Any:
    """Return the items of ``list2`` that also occur in ``list1``."""
    seen = set(list1)
    return _same_kind(list1, [item for item in list2 if item in seen])


def difference(list1: Iterable[Hashable], list2: Iterable[Hashable]) -> tuple[Any, Any]:
    """Return (items of list1 absent from list2, items of list2 absent from list1)."""
    left_items = list(list1)
    right_items = list(list2)
    seen_left = set(left_items)
    seen_right = set(right_items)
    left = [item for item in left_items if item not in seen_right]
    right = [item for item in right_items if item not in seen_left]
    return _same_kind(list1, left), _same_kind(list2, right)


def union(*args: Iterable[Hashable]) -> Any:
    """Return all distinct items of the given collections, keeping first-seen order."""
    merged = dict.fromkeys(item for collection in args for item in collection)
    if not args:
        return []
    return _same_kind(args[0], list(merged))


def without(collection: Iterable[Hashable], *args: Hashable) -> Any:
    """Return ``collection`` without any of the given values."""
    excluded = set(args)
    return _same_kind(collection, [item for item in collection if item not in excluded])


def without_by(
    collection: Iterable[T], iteratee: Callable[[T], Hashable], *args: Hashable
) -> list[T]:
    """Return the items whose key from ``iteratee`` is not among the given keys."""
    excluded = set(args)
    return [item for item in collection if iteratee(item) not in excluded]


def without_empty(collection: Iterable[Any]) -> Any:
    """Return ``collection`` without empty values (None, zero, empty strings)."""
    return _same_kind(collection, [item for item in collection if item])


def without_nth(collection: Iterable[T], *args: int) -> Any:
    """Return ``collection`` without the items at the given indices.

    Indices out of range, negative ones included, are ignored.
    """
    items = list(collection)
    to_remove = {n for n in args if 0 <= n < len(items)}
    return _same_kind(
        collection, [item for i, item in enumerate(items) if i not in to_remove]
    )