"""Error handling exercises: nametags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")


def generate_nametag_text(name: str) -> str:
    """Return nametag text; an empty name is refused."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


class ParseIntError(ValueError):
    """Raised when text is not a valid integer of the target width."""


def _parse_integer(text: str, bits: int) -> int:
    if not text:
        raise ParseIntError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ParseIntError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ParseIntError("number too large to fit in target type")
    if value < -limit:
        raise ParseIntError("number too small to fit in target type")
    return value


def parse_int(text: str) -> int:
    """Parse a signed 64-bit decimal integer strictly."""
    return _parse_integer(text, 64)


def total_cost(item_quantity: str) -> int:
    """Items cost 5 tokens each plus a processing fee of 1."""
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_integer(item_quantity, 32)
    return qty * cost_per_item + processing_fee


def purchase_message(tokens: int, item_quantity: str) -> str:
    """Describe the outcome of buying item_quantity items with tokens."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationError(ValueError):
    """Raised when a value cannot be a positive nonzero integer."""


class NegativeError(CreationError):
    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroError(CreationError):
    def __init__(self) -> None:
        super().__init__("number is zero")


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise NegativeError()
        if self.value == 0:
            raise ZeroError()

    def __repr__(self) -> str:
        return f"PositiveNonzeroInteger({self.value})"


class ParsePosNonzeroError(ValueError):
    """Raised by parse_pos_nonzero; error holds the underlying cause."""

    def __init__(self, error: ParseIntError | CreationError) -> None:
        super().__init__(str(error))
        self.error = error


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger."""
    try:
        return PositiveNonzeroInteger(parse_int(text))
    except (ParseIntError, CreationError) as error:
        raise ParsePosNonzeroError(error) from error


def describe_input(text: str) -> str:
    """Parse text and describe the resulting positive integer."""
    return f"output={PositiveNonzeroInteger(parse_int(text))!r}"