"""Lifetime and lint exercises: longest strings, books, circle areas and swaps."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar

A = TypeVar("A")
B = TypeVar("B")


def longest(x: str, y: str) -> str:
    """Return the string with more UTF-8 bytes; y wins ties."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y


@dataclass(frozen=True)
class Book:
    author: str
    title: str

    def __str__(self) -> str:
        return f"{self.title} by {self.author}"


def circle_area(radius: float) -> float:
    """Area of a circle with the given radius."""
    return math.pi * radius**2


def add_optional(res: int, option: int | None) -> int:
    """Add option to res when it is present."""
    return res + option if option is not None else res


def swap(a: A, b: B) -> tuple[B, A]:
    """Return the two values in swapped order."""
    return b, a