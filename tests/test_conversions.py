import pytest

from drillrunner.exercises.conversions import (
    Color,
    Person,
    average,
    byte_counter,
    char_counter,
)

JOHN = Person(name="John", age=30)


def test_different_counts():
    s = "Café au lait"
    assert char_counter(s) != byte_counter(s)
    assert char_counter(s) == 12
    assert byte_counter(s) == 13


def test_same_counts():
    s = "Cafe au lait"
    assert char_counter(s) == byte_counter(s) == 12


def test_average_returns_proper_value():
    assert average([3.5, 0.3, 13.0, 11.7]) == 7.125


def test_average_of_empty_raises():
    with pytest.raises(ZeroDivisionError):
        average([])


def test_default_person():
    dp = Person.default()
    assert dp.name == "John"
    assert dp.age == 30


def test_from_text_good_convert():
    p = Person.from_text("Mark,20")
    assert p.name == "Mark"
    assert p.age == 20


@pytest.mark.parametrize(
    "text",
    ["", "Mark,twenty", "Mark", "Mark,", ",1", ",", ",one", "Mike,32,", "Mike,32,man"],
)
def test_from_text_falls_back_to_default(text):
    assert Person.from_text(text) == JOHN


def test_parse_good_input():
    p = Person.parse("John,32")
    assert p.name == "John"
    assert p.age == 32


@pytest.mark.parametrize(
    "text",
    ["", "John,", "John,twenty", "John", ",1", ",", ",one", "John,32,", "John,32,man"],
)
def test_parse_rejects_bad_input(text):
    with pytest.raises(ValueError):
        Person.parse(text)


def test_parse_rejects_negative_age():
    with pytest.raises(ValueError):
        Person.parse("John,-3")


@pytest.mark.parametrize(
    "values",
    [
        (256, 1000, 10000),
        (-1, -10, -256),
        (-1, 255, 255),
        [1000, 10000, 256],
        [-10, -256, -1],
        [-1, 255, 255],
        [10000, 256, 1000],
        [-256, -1, -10],
        [0, 0, 0, 0],
        [0, 0],
    ],
)
def test_color_rejects_bad_values(values):
    with pytest.raises(ValueError):
        Color.from_values(values)


@pytest.mark.parametrize("values", [(183, 65, 14), [183, 65, 14]])
def test_color_correct(values):
    assert Color.from_values(values) == Color(red=183, green=65, blue=14)


def test_color_rejects_non_integers():
    with pytest.raises(TypeError):
        Color.from_values([1.5, 2, 3])


def test_color_bounds_are_inclusive():
    assert Color.from_values((0, 255, 0)) == Color(red=0, green=255, blue=0)