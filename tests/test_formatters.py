# tests/test_formatters.py

import math

import core.formatters as formatters


def test_format_list_with_and():
    assert formatters.format_list_with_and([]) == ""
    assert formatters.format_list_with_and(["A"]) == "A"
    assert formatters.format_list_with_and(["A", "B"]) == "A and B"
    assert formatters.format_list_with_and(["A", "B", "C"]) == "A, B, and C"


def test_format_percent():
    assert formatters.format_percent(87.5) == "87.50%"
    assert formatters.format_percent(None) == "0%"
    assert formatters.format_percent(math.nan) == "0%"


def test_format_points():
    assert formatters.format_points(8.0, 10.0) == "8 / 10.00"
    assert formatters.format_points(7.5, 10.0) == "7.5 / 10.00"


def test_format_weight():
    assert formatters.format_weight(50.0) == "50%"
    assert formatters.format_weight(12.5) == "12.5%"
    assert formatters.format_weight(None) == "[UNWEIGHTED]"


def test_format_standing():
    assert formatters.format_standing(90.0) == "GOOD"
    assert formatters.format_standing(75.0) == "GOOD"
    assert formatters.format_standing(60.0) == "FAIR"
    assert formatters.format_standing(10.0) == "POOR"
    assert formatters.format_standing(math.nan) == "POOR"
