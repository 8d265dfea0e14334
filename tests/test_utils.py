# tests/test_utils.py

import pytest

from core.utils import coerce_count, coerce_number, natural_sort_key, rename_key


def test_rename_key_keeps_position():
    mapping = {"a": 1, "b": 2, "c": 3}

    rename_key(mapping, "b", "z")

    assert list(mapping.items()) == [("a", 1), ("z", 2), ("c", 3)]


def test_rename_key_to_same_key():
    mapping = {"a": 1}

    assert rename_key(mapping, "a", "a") == {"a": 1}


def test_rename_key_errors():
    mapping = {"a": 1, "b": 2}

    with pytest.raises(KeyError):
        rename_key(mapping, "x", "y")

    with pytest.raises(ValueError):
        rename_key(mapping, "a", "b")

    assert mapping == {"a": 1, "b": 2}


def test_coerce_number():
    assert coerce_number("7.5", "Points") == 7.5
    assert coerce_number(3, "Points") == 3.0

    with pytest.raises(TypeError, match="Points must be a number."):
        coerce_number("seven", "Points")

    with pytest.raises(TypeError):
        coerce_number(True, "Points")

    with pytest.raises(TypeError):
        coerce_number(None, "Points")


def test_coerce_count():
    assert coerce_count(None, "Drops") == 0
    assert coerce_count("", "Drops") == 0
    assert coerce_count("2", "Drops") == 2

    with pytest.raises(TypeError):
        coerce_count("many", "Drops")


def test_natural_sort_key():
    names = ["Quiz 10", "quiz 2", "Exam", "Quiz 1"]

    assert sorted(names, key=natural_sort_key) == ["Exam", "Quiz 1", "quiz 2", "Quiz 10"]
