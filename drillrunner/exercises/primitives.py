"""Primitive type and string exercises."""

from __future__ import annotations

from collections.abc import Sequence, Sized


def greeting(is_morning: bool, is_evening: bool) -> list[str]:
    """The greetings that apply to the time of day."""
    messages = []
    if is_morning:
        messages.append("Good morning!")
    if is_evening:
        messages.append("Good evening!")
    return messages


def describe_character(character: str) -> str:
    """Classify a character as alphabetic, numeric or neither."""
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def array_size_message(values: Sized) -> str:
    """Comment on whether the collection holds at least 100 elements."""
    if len(values) >= 100:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def middle_slice(values: Sequence) -> Sequence:
    """The elements at positions 1 to 3."""
    return values[1:4]


def second_of(numbers: Sequence):
    """The second element."""
    return numbers[1]


def describe_cat(cat: tuple[str, float]) -> str:
    name, age = cat
    return f"{name} is {age} years old."


def current_favorite_color() -> str:
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    return attempt in ("green", "blue", "red")