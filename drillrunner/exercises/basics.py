"""First exercises: variables, functions, conditionals and the early quizzes."""

from __future__ import annotations

from collections.abc import Iterable

NUMBER = 3


def calculate_apple_price(num_apples: int) -> int:
    """Apples cost 2 each, or 1 each when buying more than 40."""
    if num_apples <= 40:
        return num_apples * 2
    return num_apples


def string_values() -> list[str]:
    """The strings built by the string quiz, in order."""
    return [
        "blue",
        "red",
        "hi",
        "rust is fun!",
        "nice weather",
        f"Interpolation {'Station'}",
        "abc"[0:1],
        "  hello there ".strip(),
        "Happy Monday!".replace("Mon", "Tues"),
        "mY sHiFt KeY iS sTiCkY".lower(),
    ]


def times_two(num: int) -> int:
    return num * 2


def is_even(num: int) -> bool:
    return num % 2 == 0


def my_macro(text: str) -> str:
    """Greet the given text."""
    return f"Hello {text}"


def describe_number(x: int) -> str:
    """"Ten!" when x is ten, "Not ten!" otherwise."""
    if x == 10:
        return "Ten!"
    return "Not ten!"


def number_lines(values: Iterable[int]) -> list[str]:
    """One "Number n" line per value."""
    return [f"Number {value}" for value in values]


def call_me(num: int) -> list[str]:
    """The ring messages for the given number of calls."""
    return [f"Ring! Call number {i}" for i in range(1, num + 1)]


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num


def bigger(a: int, b: int) -> int:
    return b if a < b else a


def fizz_if_foo(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"