"""Conversion exercises: counting, averaging and parsing people and colours."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def byte_counter(arg: str) -> int:
    """Number of bytes in the UTF-8 encoding of the text."""
    return len(arg.encode("utf-8"))


def char_counter(arg: str) -> int:
    """Number of characters in the text."""
    return len(arg)


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of the values."""
    return sum(values, 0.0) / len(values)


def _parse_usize(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid digit found in {text!r}")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


@dataclass(frozen=True)
class Person:
    """A named person with an age."""

    name: str
    age: int

    @classmethod
    def default(cls) -> Person:
        """The fallback person: John, aged 30."""
        return cls(name="John", age=30)

    @classmethod
    def from_text(cls, s: str) -> Person:
        """Build from "name,age", falling back to the default on any problem."""
        try:
            return cls.parse(s)
        except ValueError:
            return cls.default()

    @classmethod
    def parse(cls, s: str) -> Person:
        """Build from "name,age"; raise ValueError if the text is malformed."""
        if not s:
            raise ValueError("empty input")
        parts = s.split(",")
        if len(parts) != 2:
            raise ValueError(f"expected exactly two fields, got {len(parts)}")
        name, age = parts
        if not name:
            raise ValueError("missing name")
        return cls(name=name, age=_parse_usize(age))


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0..=255."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_values(cls, values: Sequence[int]) -> Color:
        """Build from exactly three integer components; raise ValueError otherwise."""
        components = list(values)
        if len(components) != 3:
            raise ValueError(f"expected 3 components, got {len(components)}")
        for component in components:
            if isinstance(component, bool) or not isinstance(component, int):
                raise TypeError(f"component {component!r} is not an integer")
            if not 0 <= component <= 255:
                raise ValueError(f"component {component} is outside 0..=255")
        red, green, blue = components
        return cls(red=red, green=green, blue=blue)