"""Conversion exercises: building a Person from "name,age" text."""

from __future__ import annotations

import re
from dataclasses import dataclass

_UNSIGNED = re.compile(r"\+?[0-9]+")
_USIZE_MAX = 2**64 - 1


class ParsePersonError(ValueError):
    """Raised when text cannot be parsed into a Person."""


class EmptyInput(ParsePersonError):
    """The input text was empty."""

    def __init__(self) -> None:
        super().__init__("empty input")


class BadLen(ParsePersonError):
    """The input did not hold exactly two comma separated fields."""

    def __init__(self) -> None:
        super().__init__("incorrect number of fields")


class NoName(ParsePersonError):
    """The name field was empty."""

    def __init__(self) -> None:
        super().__init__("empty name field")


class InvalidAge(ParsePersonError):
    """The age field was not an unsigned integer."""


def _parse_age(text: str) -> int:
    if not text:
        raise InvalidAge("cannot parse integer from empty string")
    if not _UNSIGNED.fullmatch(text):
        raise InvalidAge("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise InvalidAge("number too large to fit in target type")
    return value


@dataclass(frozen=True)
class Person:
    """A person with a name and an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> "Person":
        """The fallback person: John, aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, text: str) -> "Person":
        """Build a Person from "name,age", falling back to the default on any problem."""
        name, separator, age_text = text.partition(",")
        if not separator:
            return cls.default()
        try:
            age = _parse_age(age_text)
        except InvalidAge:
            return cls.default()
        if not name:
            return cls.default()
        return cls(name=name, age=age)

    @classmethod
    def parse(cls, text: str) -> "Person":
        """Build a Person from "name,age", raising ParsePersonError on any problem."""
        if not text:
            raise EmptyInput()
        fields = text.split(",")
        if len(fields) != 2:
            raise BadLen()
        name, age_text = fields
        age = _parse_age(age_text)
        if not name:
            raise NoName()
        return cls(name=name, age=age)