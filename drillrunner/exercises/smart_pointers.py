"""Shared data across threads, recursive cons lists and plain iteration."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

_FRUITS = ("banana", "custard apple", "avocado", "peach", "raspberry", "grape")


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    return Nil()


def create_non_empty_list() -> Cons:
    return Cons(0, Nil())


def offset_sums(numbers: Sequence[int], workers: int = 8) -> list[int]:
    """Sum every workers-th number per offset, one thread per offset."""
    if workers < 1:
        raise ValueError("at least one worker is needed")
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(
            pool.map(lambda offset: sum(numbers[offset::workers]), range(workers))
        )


def favourite_fruits() -> Iterator[str]:
    """An iterator over the favourite fruits, in order."""
    return iter(_FRUITS)