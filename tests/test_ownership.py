import pytest

from drillrunner.exercises.ownership import (
    add_option,
    drain_optional,
    favourite_snacks,
    fill_vec,
    make_sausage,
    my_macro,
    option_numbers,
    print_number,
    run_jobs,
    values_differ,
)


def test_fill_vec_from_empty():
    assert fill_vec([]) == [22, 44, 66]
    assert fill_vec() == [22, 44, 66]


def test_fill_vec_does_not_change_input():
    original = [1]
    filled = fill_vec(original)
    assert original == [1]
    assert filled[0] == 1
    assert filled[1:] == [22, 44, 66]


def test_print_number(capsys):
    print_number(13)
    print_number(99)
    assert capsys.readouterr().out == "printing: 13\nprinting: 99\n"


def test_print_number_without_value():
    with pytest.raises(ValueError):
        print_number(None)


def test_option_numbers_shape():
    numbers = option_numbers()
    assert len(numbers) == 5
    assert numbers == sorted(numbers)
    assert numbers[0] == 0


def test_drain_optional_pops_from_end():
    values = [1, None, 3]
    assert list(drain_optional(values)) == [3, 1]
    assert values == []


def test_make_sausage(capsys):
    make_sausage()
    assert capsys.readouterr().out == "sausage!\n"


def test_favourite_snacks():
    assert favourite_snacks() == ("Pear", "Cucumber")


def test_my_macro_without_value(capsys):
    my_macro()
    assert capsys.readouterr().out == "Check out my macro!\n"


def test_my_macro_with_value(capsys):
    my_macro(7777)
    assert capsys.readouterr().out == "Look at this other macro: 7777\n"


def test_my_macro_rejects_two_values():
    with pytest.raises(TypeError):
        my_macro(1, 2)


def test_run_jobs_completes_all(capsys):
    assert run_jobs(3, 0.01, 0.0) == 3
    assert "waiting... " in capsys.readouterr().out


def test_run_jobs_with_no_jobs(capsys):
    assert run_jobs(0, 0.01, 0.0) == 0
    assert capsys.readouterr().out == ""


def test_values_differ():
    assert values_differ(1.2331, 1.2332) is True
    assert values_differ(1.5, 1.5) is False


def test_add_option():
    assert add_option(42, 12) == 54
    assert add_option(42, None) == 42