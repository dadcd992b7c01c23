"""Error handling exercises: name tags, token costs and validated integers."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import IO

_INTEGER = re.compile(r"[+-]?[0-9]+")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, strictly, without whitespace."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity; raise ValueError if it is not a number."""
    quantity = _parse_int(item_quantity, 32)
    return quantity * _COST_PER_ITEM + _PROCESSING_FEE


def purchase(tokens: int, item_quantity: str) -> str:
    """Describe the outcome of buying the typed quantity with the given tokens."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationReason(enum.Enum):
    """Why a positive non-zero integer could not be made."""

    NEGATIVE = "Number is negative"
    ZERO = "Number is zero"

    def __str__(self) -> str:
        return self.value


class CreationError(ValueError):
    """The value given is not a positive non-zero integer."""

    def __init__(self, reason: CreationReason) -> None:
        super().__init__(str(reason))
        self.reason = reason


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value == 0:
            raise CreationError(CreationReason.ZERO)
        if self.value < 0:
            raise CreationError(CreationReason.NEGATIVE)


def read_and_validate(stream: IO) -> PositiveNonzeroInteger:
    """Read one line and turn it into a positive non-zero integer.

    Reading errors propagate as OSError, a malformed number as ValueError and
    a zero or negative number as CreationError.
    """
    line = stream.readline()
    if isinstance(line, bytes):
        line = line.decode("utf-8")
    return PositiveNonzeroInteger(_parse_int(line.strip(), 64))