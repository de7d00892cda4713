"""Trait exercises: appending "Bar", shared licensing info and combined behaviour."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Any


@singledispatch
def append_bar(value: Any) -> Any:
    """Append "Bar" to a string or a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Software that shares the same licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Return True when both pieces of software carry the same licensing info."""
    return software.licensing_info() == software_two.licensing_info()


@dataclass
class SomeStruct:
    name: str

    def some_function(self) -> bool:
        return True

    def other_function(self) -> bool:
        return True


def some_func(item: SomeStruct) -> bool:
    """Return True when both of the item's checks pass."""
    return item.some_function() and item.other_function()