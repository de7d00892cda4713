"""Function and if exercises: calls, sale prices, squares and comparisons."""

from __future__ import annotations


def call_me(num: int = 0) -> None:
    """Print one ring per call, numbered from 1."""
    for number in range(1, num + 1):
        print(f"Ring! Call number {number}")


def is_even(num: int) -> bool:
    """Return True when num is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return num squared."""
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", otherwise "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"