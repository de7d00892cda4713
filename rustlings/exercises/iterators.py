"""Iterator exercises: fruits, capitalisation, division, factorials and progress counts."""

from __future__ import annotations

import enum
import math
from typing import Iterable, Iterator, Mapping, Sequence

_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)


def favourite_fruits() -> Iterator[str]:
    """Return an iterator over the favourite fruits, in order."""
    return iter(["banana", "custard apple", "avocado", "peach", "raspberry"])


def capitalize_first(text: str) -> str:
    """Upper-case the first character: "hello" -> "Hello"."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word: ["hello", "world"] -> ["Hello", "World"]."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them: ["hello", " ", "world"] -> "Hello World"."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """Raised when a division cannot be carried out exactly."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor was zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Return a / b when a is evenly divisible by b, else raise a DivisionError."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def result_with_list() -> list[int]:
    """Divide each number by 27; the first failure is raised."""
    return [divide(number, 27) for number in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping each quotient or error in place."""

    def attempt(number: int) -> int | DivisionError:
        try:
            return divide(number, 27)
        except DivisionError as error:
            return error

    return [attempt(number) for number in _NUMBERS]


def factorial(num: int) -> int:
    """Return num! as an unsigned 64-bit value."""
    if num < 0:
        raise ValueError("factorial is defined for non-negative numbers only")
    result = math.prod(range(2, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(enum.Enum):
    """How far an exercise has come."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_for(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress using an explicit loop."""
    count = 0
    for progress in progress_map.values():
        if progress is value:
            count += 1
    return count


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection_for(collection: Sequence[Mapping[str, Progress]], value: Progress) -> int:
    """Count entries with the given progress across maps using explicit loops."""
    count = 0
    for progress_map in collection:
        for progress in progress_map.values():
            if progress is value:
                count += 1
    return count


def count_collection_iterator(
    collection: Sequence[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across all maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)