"""Query helpers over iterables and mappings."""

from __future__ import annotations

from itertools import islice
from typing import Any, Callable, Iterable, List, Mapping, Optional, TypeVar

T = TypeVar("T")
S = TypeVar("S")


def all_match(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """True if every item satisfies ``predicate`` (True for no items)."""
    return all(predicate(item) for item in items)


def any_match(items: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """True if at least one item satisfies ``predicate``."""
    return any(predicate(item) for item in items)


def where(items: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:
    """The items that satisfy ``predicate``, in order."""
    return [item for item in items if predicate(item)]


def first(items: Iterable[T], predicate: Callable[[T], bool], default: Optional[T] = None) -> Optional[T]:
    """The first item satisfying ``predicate``, else ``default``."""
    return next((item for item in items if predicate(item)), default)


def last(items: Iterable[T], predicate: Callable[[T], bool], default: Optional[T] = None) -> Optional[T]:
    """The last item satisfying ``predicate``, else ``default``."""
    return next((item for item in reversed(list(items)) if predicate(item)), default)


def reverse(items: Iterable[T]) -> List[T]:
    """The items in reverse order."""
    return list(reversed(list(items)))


def select(items: Iterable[T], selector: Callable[[T], S]) -> List[S]:
    """Each item mapped through ``selector``."""
    return [selector(item) for item in items]


def count(items: Iterable[T], predicate: Callable[[T], bool]) -> int:
    """How many items satisfy ``predicate``."""
    return sum(1 for item in items if predicate(item))


def element_at(items: Iterable[T], index: int) -> T:
    """The item at position ``index``."""
    if index < 0:
        raise IndexError("index must not be negative")
    for item in islice(items, index, index + 1):
        return item
    raise IndexError("index out of range")


def values(mapping: Mapping[Any, S]) -> List[S]:
    """The mapping's values, ordered by key."""
    return [mapping[key] for key in sorted(mapping)]


def keys(mapping: Mapping[T, Any]) -> List[T]:
    """The mapping's keys, in sorted order."""
    return sorted(mapping)


def take(items: Iterable[T], n: int) -> List[T]:
    """At most the first ``n`` items."""
    return list(islice(items, max(n, 0)))


def take_while(items: Iterable[T], condition: Callable[[], bool]) -> List[T]:
    """Items in order for as long as the argument-less ``condition`` holds.

    The condition is checked once before each item is taken.
    """
    taken: List[T] = []
    for item in items:
        if not condition():
            break
        taken.append(item)
    return taken


def for_each(items: Iterable[T], action: Callable[[T, int], Any]) -> None:
    """Call ``action(item, index)`` for every item."""
    for index, item in enumerate(items):
        action(item, index)