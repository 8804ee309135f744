"""Helpers for n-dimensional loops and for working with sequences of items."""

from __future__ import annotations

import itertools
from typing import Any, Callable, Iterable, Iterator, Sequence

__all__ = [
    "iterate_nd",
    "nd_loop",
    "nd_loop_inc_idx",
    "make_integer_sequence_offset",
    "values_unique",
    "values_in_range",
    "is_set",
    "concatenate",
    "front",
    "contains",
    "to_tuple",
    "filter_items",
]


def _validate_order(order: Sequence[int], dim: int) -> None:
    if dim <= 0:
        raise ValueError("the dimension of an n-dimensional loop must be larger than zero")
    if not values_in_range(order, 0, dim - 1):
        raise ValueError(f"loop order values must be in the range [0, {dim - 1}]")
    if not values_unique(order):
        raise ValueError("loop order values must be unique")


def iterate_nd(order: Sequence[int], extent: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """Yield every index of ``extent`` with loops nested in ``order``.

    The first entry of ``order`` is the outermost loop, the last the innermost.
    Dimensions not named in ``order`` stay at zero.
    """
    order = tuple(order)
    extent = tuple(extent)
    _validate_order(order, len(extent))
    idx = [0] * len(extent)
    for values in itertools.product(*(range(extent[d]) for d in order)):
        for d, v in zip(order, values):
            idx[d] = v
        yield tuple(idx)


def nd_loop(order: Sequence[int], extent: Sequence[int], fn: Callable[[tuple[int, ...]], Any]) -> None:
    """Call ``fn`` with each index of ``extent``, loops nested in ``order``."""
    for idx in iterate_nd(order, extent):
        fn(idx)


def nd_loop_inc_idx(extent: Sequence[int], fn: Callable[[tuple[int, ...]], Any]) -> None:
    """Call ``fn`` with each index of ``extent``; dimension 0 is the outermost loop."""
    extent = tuple(extent)
    nd_loop(range(len(extent)), extent, fn)


def make_integer_sequence_offset(begin: int, size: int) -> tuple[int, ...]:
    """The ``size`` consecutive integers starting at ``begin``."""
    if size < 0:
        raise ValueError("the size of an integer sequence must be non-negative")
    return tuple(range(begin, begin + size))


def values_unique(values: Iterable[Any]) -> bool:
    """True if no two of ``values`` are equal."""
    return is_set(values)


def values_in_range(values: Iterable[Any], minimum: Any, maximum: Any) -> bool:
    """True if every value lies in the closed range [minimum, maximum]."""
    return all(minimum <= v <= maximum for v in values)


def is_set(items: Iterable[Any]) -> bool:
    """True if the items are pairwise distinct; unhashable items are compared by equality."""
    seen: list[Any] = []
    for item in items:
        if any(item == other for other in seen):
            return False
        seen.append(item)
    return True


def concatenate(*args: Sequence[Any]) -> Sequence[Any]:
    """Join sequences of the same type into one sequence of that type."""
    if not args:
        raise TypeError("concatenate needs at least one sequence")
    kind = type(args[0])
    for arg in args[1:]:
        if type(arg) is not kind:
            raise TypeError(
                f"cannot concatenate {type(arg).__name__} to {kind.__name__}"
            )
    if len(args) == 1:
        return args[0]
    if kind is str:
        return "".join(args)
    return kind(itertools.chain.from_iterable(args))


def front(items: Sequence[Any]) -> Any:
    """The first item of a non-empty sequence."""
    if len(items) == 0:
        raise IndexError("front of an empty sequence")
    return items[0]


def contains(items: Iterable[Any], value: Any) -> bool:
    """True if an item equal to ``value`` is present."""
    return any(item == value for item in items)


def to_tuple(*args: Any) -> Any:
    """A single list or tuple argument is returned unchanged; otherwise the arguments as a tuple."""
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        return args[0]
    return tuple(args)


def filter_items(predicate: Callable[[Any], bool], items: Iterable[Any]) -> tuple[Any, ...]:
    """The items for which ``predicate`` holds, in order."""
    return tuple(item for item in items if predicate(item))