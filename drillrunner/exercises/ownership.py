"""Moving values, optional values, modules, macros, threads and lint fixes."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Iterable, Iterator


def fill_vec(values: Iterable[int] = ()) -> list[int]:
    """A new list holding the given values followed by 22, 44 and 66."""
    filled = list(values)
    filled.extend((22, 44, 66))
    return filled


def print_number(maybe_number: int | None) -> None:
    """Print the number; raise ValueError when there is none."""
    if maybe_number is None:
        raise ValueError("called print_number with no number")
    print(f"printing: {maybe_number}")


def option_numbers() -> list[int]:
    """Five computed numbers, one per step."""
    return [((step * 1235) + 2) // (4 * 16) for step in range(5)]


def drain_optional(values: list[int | None]) -> Iterator[int]:
    """Pop values from the end, yielding those that are present."""
    while values:
        value = values.pop()
        if value is not None:
            yield value


def make_sausage() -> str:
    """Announce a sausage and return the announcement."""
    message = "sausage!"
    sys.stdout.write(message + "\n")
    return message


def favourite_snacks() -> tuple[str, str]:
    """The favourite fruit and vegetable."""
    return "Pear", "Cucumber"


def my_macro(*args) -> None:
    """Print a fixed message, or one showing a single given value."""
    if not args:
        print("Check out my macro!")
    elif len(args) == 1:
        print(f"Look at this other macro: {args[0]}")
    else:
        raise TypeError(f"my_macro takes at most one value, got {len(args)}")


def run_jobs(
    count: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5
) -> int:
    """Complete jobs on a worker thread while waiting for all of them here.

    Returns the number of completed jobs.
    """
    completed = 0
    condition = threading.Condition()

    def worker() -> None:
        nonlocal completed
        for _ in range(count):
            time.sleep(job_delay)
            with condition:
                completed += 1
                condition.notify()

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    with condition:
        while completed < count:
            print("waiting... ")
            condition.wait()
            time.sleep(poll_delay)
    thread.join()
    return completed


def values_differ(x: float, y: float) -> bool:
    """Whether two floats differ by more than machine epsilon."""
    return abs(y - x) > sys.float_info.epsilon


def add_option(total: int, option: int | None) -> int:
    """Add the optional value to the total when it is present."""
    if option is not None:
        total += option
    return total