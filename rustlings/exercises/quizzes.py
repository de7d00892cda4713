"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def calculate_price_of_apples(nb: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return nb if nb > 40 else nb * 2


class Command(enum.Enum):
    """Commands without arguments for the transformer."""

    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" the given number of times."""

    times: int


def _apply(text: str, command: Command | Append) -> str:
    match command:
        case Command.UPPERCASE:
            return text.translate(_ASCII_UPPER)
        case Command.TRIM:
            return text.strip()
        case Append(times=times):
            return text + "bar" * times
    raise TypeError(f"unknown command: {command!r}")


def transformer(items: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in items]


T = TypeVar("T")


@dataclass
class ReportCard(Generic[T]):
    """A report card with a numeric or alphabetic grade."""

    grade: T
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"