"""Shared data across worker threads, and a recursive cons list."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Union


def offset_sums(numbers: Iterable[int], workers: int = 8) -> list[int]:
    """Sum, in one thread per offset, the numbers whose value modulo workers equals the offset."""
    if workers <= 0:
        raise ValueError("workers must be positive")
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        return sum(n for n in shared if n % workers == offset)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    next: "List"


List = Union[Cons, Nil]


def create_empty_list() -> List:
    """Return an empty cons list."""
    return Nil()


def create_non_empty_list() -> List:
    """Return a cons list with one element."""
    return Cons(92, Nil())