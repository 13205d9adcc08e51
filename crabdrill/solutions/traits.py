"""Reference solutions for the trait exercises."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or the item "Bar" to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Anything that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both carry the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    def some_function(self) -> bool:
        return True


class OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    pass


class OtherStruct(SomeTrait, OtherTrait):
    pass


def some_func(item) -> bool:
    """True when both capabilities of the item report True."""
    return item.some_function() and item.other_function()