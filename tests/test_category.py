# tests/test_category.py

import pytest

from models.assignment import Assignment
from models.category import Category


def test_category_average(sample_weighted_category):
    assert sample_weighted_category.average == 65.0


def test_empty_category_average_is_none():
    assert Category("Empty", 20).average is None


def test_append_assignment_recomputes_average(sample_weighted_category):
    sample_weighted_category.append_assignment(Assignment("Quiz 3", 10, 10))
    assert sample_weighted_category.average == pytest.approx(76.6666, rel=1e-4)


def test_remove_assignments(sample_weighted_category):
    quiz_1, quiz_2 = sample_weighted_category.grades

    removed = sample_weighted_category.remove_assignments([quiz_2])

    assert removed == [quiz_2]
    assert sample_weighted_category.grades == [quiz_1]
    assert sample_weighted_category.average == 80.0


def test_remove_all_assignments_leaves_average_none(sample_weighted_category):
    sample_weighted_category.remove_assignments(list(sample_weighted_category.grades))

    assert sample_weighted_category.grades == []
    assert sample_weighted_category.average is None


def test_remove_unknown_assignment_changes_nothing(sample_weighted_category):
    quiz_1 = sample_weighted_category.grades[0]
    lookalike = Assignment("Quiz 1", 8, 10)

    with pytest.raises(IndexError):
        sample_weighted_category.remove_assignments([quiz_1, lookalike])

    assert len(sample_weighted_category.grades) == 2
    assert sample_weighted_category.average == 65.0


def test_num_drops_applies_to_average(sample_weighted_category):
    sample_weighted_category.num_drops = 1
    sample_weighted_category.recompute_average()

    assert sample_weighted_category.average == 80.0


def test_clear_what_ifs(sample_weighted_category):
    quiz_2 = sample_weighted_category.grades[1]
    quiz_2.hypothetical_points = 10
    sample_weighted_category.recompute_average()
    assert sample_weighted_category.average == 90.0

    assert sample_weighted_category.clear_what_ifs() == 1
    assert sample_weighted_category.average == 65.0


def test_weight_coercion():
    assert Category("Labs", "25").weight == 25.0
    assert Category("Labs", "").weight is None
    assert not Category("Labs").is_weighted

    with pytest.raises(TypeError):
        Category("Labs", "heavy")

    with pytest.raises(ValueError):
        Category("Labs", float("inf"))


def test_weighted_category_to_dict(sample_weighted_category):
    data = sample_weighted_category.to_dict()

    assert data["weight"] == 50.0
    assert data["numDrops"] == 0
    assert [g["name"] for g in data["grades"]] == ["Quiz 1", "Quiz 2"]


def test_unweighted_category_to_dict_omits_weight(sample_unweighted_category):
    data = sample_unweighted_category.to_dict()

    assert "weight" not in data
    assert data["numDrops"] == 0


def test_category_from_dict():
    category = Category.from_dict(
        "Quizzes",
        {
            "weight": 30,
            "numDrops": 1,
            "grades": [{"name": "Quiz 1", "actualPoints": 7, "possiblePoints": 10}],
        },
    )

    assert category.name == "Quizzes"
    assert category.weight == 30.0
    assert category.num_drops == 1
    assert category.average == 70.0


def test_category_from_import_defaults():
    category = Category.from_import(
        "Labs", {"grades": [{"name": "Lab 1", "actualPoints": 9, "possiblePoints": 10}]}
    )

    assert category.weight is None
    assert category.num_drops == 0
    assert category.average == 90.0


def test_category_from_import_rejects_bad_grades():
    with pytest.raises(TypeError):
        Category.from_import("Labs", {"grades": "none"})

    with pytest.raises(TypeError):
        Category.from_import("Labs", [1, 2, 3])


def test_category_to_str(sample_unweighted_category, sample_weighted_category):
    assert (
        sample_unweighted_category.__str__()
        == "CATEGORY: name: Extra, weight: None, drops: 0"
    )
    assert (
        sample_weighted_category.__str__()
        == "CATEGORY: name: Quizzes, weight: 50.0, drops: 0"
    )


def test_remove_assignment_held_twice():
    quiz = Assignment("Quiz", 5, 10)
    category = Category("Quizzes", grades=[quiz, quiz])

    assert category.remove_assignments([quiz]) == [quiz, quiz]
    assert category.grades == []
