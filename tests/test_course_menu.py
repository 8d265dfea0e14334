# tests/test_course_menu.py

from cli.menu_helpers import MenuSignal
from cli.menus import course_menu


def feed_input(monkeypatch, *answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))


def test_find_course_by_name_search(monkeypatch, imported_gradebook):
    feed_input(monkeypatch, "1", " cs 161 ")

    course = course_menu.prompt_find_course(imported_gradebook)

    assert course is imported_gradebook.courses[0]


def test_find_course_by_name_search_without_match(
    monkeypatch, capsys, imported_gradebook
):
    feed_input(monkeypatch, "1", "Biology")

    assert course_menu.prompt_find_course(imported_gradebook) is MenuSignal.CANCEL
    assert "[ERROR: NOT_FOUND]" in capsys.readouterr().out


def test_find_course_from_list(monkeypatch, imported_gradebook):
    feed_input(monkeypatch, "2", "1")

    course = course_menu.prompt_find_course(imported_gradebook)

    assert course is imported_gradebook.courses[0]
