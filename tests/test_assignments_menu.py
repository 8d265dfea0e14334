# tests/test_assignments_menu.py

from cli.menus import assignments_menu
from models.assignment import Assignment
from models.category import Category
from models.course import Course


def feed_input(monkeypatch, *answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))


def sample_labs_course():
    return Course(
        "Chem",
        4,
        {
            "Labs": Category(
                "Labs",
                grades=[
                    Assignment("Lab 10", 9, 10),
                    Assignment("Lab 2", 12, 20),
                    Assignment("Lab 1", 0, 0),
                ],
            )
        },
    )


def names(assignments):
    return [a.name for a in assignments]


def test_default_order_is_natural_name_order():
    course = sample_labs_course()

    assert names(assignments_menu.sorted_assignments(course, "Labs")) == [
        "Lab 1",
        "Lab 2",
        "Lab 10",
    ]


def test_sort_by_score_puts_ungraded_lowest():
    course = sample_labs_course()

    ordered = assignments_menu.sorted_assignments(
        course, "Labs", assignments_menu.by_score, descending=True
    )

    assert names(ordered) == ["Lab 10", "Lab 2", "Lab 1"]


def test_sort_by_possible_points():
    course = sample_labs_course()

    ordered = assignments_menu.sorted_assignments(
        course, "Labs", assignments_menu.by_possible_points
    )

    assert names(ordered) == ["Lab 1", "Lab 10", "Lab 2"]


def test_prompt_sort_order(monkeypatch):
    feed_input(monkeypatch, "4")
    assert assignments_menu.prompt_sort_order() == (assignments_menu.by_score, True)

    feed_input(monkeypatch, "0")
    assert assignments_menu.prompt_sort_order() == (assignments_menu.by_name, False)
