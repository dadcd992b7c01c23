"""Generic containers, report cards and appending "Bar"."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Generic, TypeVar

T = TypeVar("T")


def shopping_list() -> list[str]:
    """A shopping list holding milk."""
    items: list[str] = []
    items.append("milk")
    return items


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@dataclass(frozen=True)
class ReportCard(Generic[T]):
    """A student's report card with a numeric or alphabetic grade."""

    grade: T
    student_name: str
    student_age: int

    def __str__(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )

    def render(self) -> str:
        """The printable report line."""
        return str(self)


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]