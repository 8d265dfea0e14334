# tests/test_scoring.py

import math

from core.scoring import assignment_grade, category_average, weighted_average


def test_assignment_grade():
    assert assignment_grade(8, 10) == 80.0
    assert assignment_grade(45, 50) == 90.0


def test_assignment_grade_uses_hypothetical_points():
    assert assignment_grade(2, 10, hypothetical_points=9) == 90.0
    assert assignment_grade(100, 10, hypothetical_points=0) == 0.0


def test_assignment_grade_with_zero_possible_points_is_nan():
    assert math.isnan(assignment_grade(5, 0))
    assert math.isnan(assignment_grade(5, math.inf))


def test_category_average():
    assert category_average([80.0, 50.0]) == 65.0


def test_empty_category_average_is_none():
    assert category_average([]) is None
    assert category_average([], num_drops=2) is None


def test_category_average_drops_lowest_grades():
    assert category_average([100.0, 50.0, 90.0], num_drops=1) == 95.0
    assert category_average([100.0, 50.0, 90.0], num_drops=2) == 100.0


def test_category_average_keeps_at_least_one_grade():
    assert category_average([40.0, 60.0], num_drops=5) == 60.0
    assert category_average([70.0], num_drops=1) == 70.0


def test_category_average_ignores_negative_drops():
    assert category_average([80.0, 50.0], num_drops=-1) == 65.0


def test_category_average_drops_nan_first():
    assert category_average([math.nan, 80.0, 60.0], num_drops=1) == 70.0


def test_weighted_average_excludes_undefined_entries():
    entries = [(50.0, 80.0), (50.0, 60.0), (None, 90.0), (20.0, None)]
    assert weighted_average(entries) == 70.0


def test_weighted_average_excludes_nan_average():
    assert weighted_average([(50.0, math.nan), (25.0, 40.0)]) == 40.0


def test_weighted_average_without_weights_is_nan():
    assert math.isnan(weighted_average([]))
    assert math.isnan(weighted_average([(None, 90.0)]))
    assert math.isnan(weighted_average([(0.0, 90.0)]))


def test_weighted_average_excludes_zero_average():
    assert weighted_average([(50.0, 0.0), (50.0, 100.0)]) == 100.0
    assert math.isnan(weighted_average([(50.0, 0.0)]))
