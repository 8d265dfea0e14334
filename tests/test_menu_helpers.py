# tests/test_menu_helpers.py

import cli.menu_helpers as helpers
from core.response import ErrorCode, Response


def feed_input(monkeypatch, *answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers))


def test_prompt_weight_and_drops_keeps_current_values(monkeypatch):
    feed_input(monkeypatch, "", "")

    assert helpers.prompt_weight_and_drops(40.0, 2) == (40.0, 2)


def test_prompt_weight_and_drops_accepts_none(monkeypatch):
    feed_input(monkeypatch, "None", "1")

    assert helpers.prompt_weight_and_drops(40.0, 2) == (None, "1")


def test_prompt_multiple_selection(monkeypatch, sample_weighted_category):
    grades = sample_weighted_category.grades
    feed_input(monkeypatch, "7", "2, 1")

    assert helpers.prompt_multiple_selection_from_list(grades, "Quizzes") == grades


def test_prompt_multiple_selection_blank_is_empty(monkeypatch, sample_weighted_category):
    feed_input(monkeypatch, "")

    assert helpers.prompt_multiple_selection_from_list(
        sample_weighted_category.grades, "Quizzes"
    ) == []


def test_prompt_selection_rejects_negative_index(monkeypatch, sample_weighted_category):
    grades = sample_weighted_category.grades
    feed_input(monkeypatch, "-1", "2")

    assert helpers.prompt_selection_from_list(grades, "Quizzes") is grades[1]


def test_display_response_prints_warning(capsys):
    helpers.display_response(Response.succeed("Saved.", warning="Disk full."))

    output = capsys.readouterr().out
    assert "Saved." in output
    assert "[WARNING] Disk full." in output


def test_display_response_failure(capsys):
    helpers.display_response(
        Response.fail("No such category.", ErrorCode.UNKNOWN_CATEGORY)
    )

    assert "[ERROR: UNKNOWN_CATEGORY] No such category." in capsys.readouterr().out
