"""Collection exercises: fruit baskets and simple list manipulation."""

from __future__ import annotations

import enum
from collections.abc import Iterable


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and at least five fruits."""
    return {
        "banana": 2,
        "apple": 4,
        "grape": 6,
        "pear": 8,
        "peach": 1,
    }


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a growable list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Each value doubled."""
    return [value * 2 for value in values]