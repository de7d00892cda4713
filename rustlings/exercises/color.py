"""Fallible conversions of integer triples into an RGB Color."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


class IntoColorError(ValueError):
    """Raised when values cannot be converted into a Color."""


class BadLengthError(IntoColorError):
    """The sequence did not hold exactly three values."""

    def __init__(self) -> None:
        super().__init__("expected exactly three values")


class IntConversionError(IntoColorError):
    """A component lay outside 0..=255."""

    def __init__(self) -> None:
        super().__init__("colour components must be in the range 0..=255")


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit components."""

    red: int
    green: int
    blue: int

    @classmethod
    def _checked(cls, red: int, green: int, blue: int) -> "Color":
        if any(not 0 <= value <= 255 for value in (red, green, blue)):
            raise IntConversionError()
        return cls(red=red, green=green, blue=blue)

    @classmethod
    def from_tuple(cls, rgb: tuple[int, int, int]) -> "Color":
        """Convert an (r, g, b) tuple."""
        red, green, blue = rgb
        return cls._checked(red, green, blue)

    @classmethod
    def from_array(cls, values: Sequence[int]) -> "Color":
        """Convert a three-element array."""
        red, green, blue = values
        return cls._checked(red, green, blue)

    @classmethod
    def from_slice(cls, values: Sequence[int]) -> "Color":
        """Convert a sequence of any length; only three values are accepted."""
        if len(values) != 3:
            raise BadLengthError()
        red, green, blue = values
        return cls._checked(red, green, blue)