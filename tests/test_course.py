# tests/test_course.py

import math

import pytest

from models.assignment import Assignment
from models.category import Category
from models.course import Course


def test_weighted_average_excludes_unweighted_categories(sample_course):
    assert sample_course.weighted_average == 70.0


def test_weighted_average_excludes_empty_categories(sample_course):
    sample_course.add_category(Category("D", 100))

    assert sample_course.weighted_average == 70.0


def test_weighted_average_without_weighted_grades_is_nan():
    course = Course("Empty", 3, {"A": Category("A", 50)})

    assert math.isnan(course.weighted_average)


def test_add_duplicate_category_raises(sample_course):
    with pytest.raises(ValueError):
        sample_course.add_category(Category("A", 10))

    assert len(sample_course.categories["A"].grades) == 1


def test_rename_category_keeps_position_and_grades(sample_course):
    grades = sample_course.categories["B"].grades

    category = sample_course.rename_category("B", "B2")

    assert list(sample_course.categories) == ["A", "B2", "C"]
    assert category.name == "B2"
    assert sample_course.categories["B2"].grades is grades


def test_rename_category_onto_existing_name_raises(sample_course):
    with pytest.raises(ValueError):
        sample_course.rename_category("B", "A")

    assert list(sample_course.categories) == ["A", "B", "C"]


def test_move_assignments(sample_course):
    b1 = sample_course.categories["B"].grades[0]

    moved = sample_course.move_assignments("B", "A", [b1])

    assert moved == [b1]
    assert sample_course.categories["B"].average is None
    assert sample_course.categories["A"].grades[-1] is b1
    assert sample_course.categories["A"].average == 70.0


def test_move_assignments_to_unknown_category_raises(sample_course):
    b1 = sample_course.categories["B"].grades[0]

    with pytest.raises(KeyError):
        sample_course.move_assignments("B", "Z", [b1])

    assert sample_course.categories["B"].grades == [b1]


def test_course_round_trip(sample_course):
    restored = Course.from_dict(sample_course.to_dict())

    assert restored.to_dict() == sample_course.to_dict()
    assert restored.weighted_average == 70.0


def test_course_from_import_rejects_non_objects():
    with pytest.raises(TypeError):
        Course.from_import("Bad", 3, [{"grades": []}])


def test_course_from_import():
    course = Course.from_import(
        "Bio",
        "4",
        {"Labs": {"weight": "40", "grades": [{"name": "L1", "actualPoints": 3, "possiblePoints": 4}]}},
    )

    assert course.credits == 4.0
    assert course.categories["Labs"].weight == 40.0
    assert course.weighted_average == 75.0


def test_credits_are_not_used_for_averages():
    grades = [Assignment("a1", 50, 100)]
    light = Course("Light", 1, {"A": Category("A", 10, grades=grades)})

    assert light.weighted_average == 50.0


def test_weighted_average_excludes_category_averaging_zero():
    course = Course(
        "Zeroes",
        3,
        {
            "A": Category("A", 50, grades=[Assignment("a1", 0, 10)]),
            "B": Category("B", 50, grades=[Assignment("b1", 10, 10)]),
        },
    )

    assert course.weighted_average == 100.0
