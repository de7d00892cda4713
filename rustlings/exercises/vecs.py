"""Vector and move exercises: arrays, doubling, filling and string ownership."""

from __future__ import annotations

from typing import Iterable, MutableSequence

_FILLERS = (22, 44, 66)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed array and a list holding the same elements."""
    a = (10, 20, 30, 40)
    return a, list(a)


def vec_loop(values: MutableSequence[int]) -> MutableSequence[int]:
    """Double every element in place and return the sequence."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


def fill_vec(values: Iterable[int]) -> list[int]:
    """Return a copy of values with 22, 44 and 66 appended."""
    return [*values, *_FILLERS]


def fill_new_vec() -> list[int]:
    """Return a new list holding 22, 44 and 66."""
    return fill_vec(())


def get_char(data: str) -> str:
    """Return the last character of data."""
    if not data:
        raise ValueError("cannot take the last character of an empty string")
    return data[-1]


def string_uppercase(data: str) -> str:
    """Print data in upper case and return it."""
    data = data.upper()
    print(data)
    return data