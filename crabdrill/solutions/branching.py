"""Reference solutions for the if and functions exercises."""

from __future__ import annotations

_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    """Where an animal lives, or "Unknown"."""
    return _HABITATS.get(animal, "Unknown")


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices 3 off."""
    return price - 10 if is_even(price) else price - 3