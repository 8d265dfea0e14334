# core/scoring.py

"""
Pure grade arithmetic for the Gradebook.

These functions are the single source of truth for every derived number in the program:
- `assignment_grade()`: the percentage earned on one assignment, honoring a what-if override.
- `category_average()`: the mean of a category's assignment grades after dropping the lowest scores.
- `weighted_average()`: the weighted mean of category averages that make up a course average.

Notes:
- Undefined results are NaN (for grades and course averages) or None (for an empty category),
  never exceptions. Display code converts both to "0%".
- Must never import from models!
"""

import math
from typing import Iterable


def is_defined(value: float | None) -> bool:
    """
    Returns True if `value` is a usable number (not None and not NaN).
    """
    return value is not None and not math.isnan(value)


def assignment_grade(
    actual_points: float,
    possible_points: float,
    hypothetical_points: float | None = None,
) -> float:
    """
    Calculates the percentage grade for a single assignment.

    Args:
        actual_points (float): The points actually earned.
        possible_points (float): The points available.
        hypothetical_points (float | None): A what-if score that replaces `actual_points` when present.

    Returns:
        The percentage `100 * points / possible_points`, or NaN if `possible_points` is zero or non-finite.
    """
    points = hypothetical_points if hypothetical_points is not None else actual_points

    if not possible_points or not math.isfinite(possible_points):
        return math.nan

    return 100 * points / possible_points


def category_average(grades: Iterable[float], num_drops: int = 0) -> float | None:
    """
    Calculates the mean of a category's assignment grades.

    Args:
        grades (Iterable[float]): The percentage grade of every assignment in the category.
        num_drops (int): How many of the lowest grades to leave out of the mean.

    Returns:
        The arithmetic mean of the remaining grades, or None if there are no grades.

    Notes:
        - At least one grade is always kept, so dropping can never turn a graded category into an empty one.
        - NaN grades sort below every real grade and are therefore dropped first.
    """
    grades = list(grades)

    if not grades:
        return None

    drops = min(max(int(num_drops or 0), 0), len(grades) - 1)

    if drops:
        grades = sorted(grades, key=lambda g: -math.inf if math.isnan(g) else g)
        grades = grades[drops:]

    return sum(grades) / len(grades)


def weighted_average(entries: Iterable[tuple[float | None, float | None]]) -> float:
    """
    Calculates a weighted mean from (weight, average) pairs.

    Args:
        entries (Iterable[tuple[float | None, float | None]]): Pairs of category weight and category average.

    Returns:
        The sum of `weight * average` divided by the sum of weights, counting only pairs where both values
        are defined and non-zero. NaN if no weight is counted.
    """
    weighted_sum = 0.0
    sum_weights = 0.0

    for weight, average in entries:
        # a zero weight or a zero average leaves the category out entirely
        if not (is_defined(weight) and is_defined(average) and weight and average):
            continue

        weighted_sum += weight * average
        sum_weights += weight

    if not sum_weights:
        return math.nan

    return weighted_sum / sum_weights
