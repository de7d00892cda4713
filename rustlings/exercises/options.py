"""Option exercises: ice cream, unwrapping and draining optional values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


def maybe_icecream(time_of_day: int) -> int | None:
    """Five pieces remain before 22:00; none from then on."""
    return 5 if time_of_day < 22 else None


def describe_number(maybe_number: int | None) -> str:
    """Describe a number that must be present."""
    if maybe_number is None:
        raise ValueError("no number to print")
    return f"printing: {maybe_number}"


def drain_optionals(values: Sequence[int | None]) -> list[int]:
    """Return the present values, taken from the end backwards."""
    return [value for value in reversed(values) if value is not None]


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def describe_point(point: Point | None) -> str:
    """Describe a point's co-ordinates, or report that there is none."""
    match point:
        case Point(x=x, y=y):
            return f"Co-ordinates are {x},{y} "
        case _:
            return "no match"