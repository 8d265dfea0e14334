# models/assignment.py

"""
The Assignment model represents a single graded item: a homework, quiz, exam, or any other scored component.

Assignments are addressed by identity, not by name. Two assignments may share a name and identical scores
and still be distinct records.

Key behaviors:
- `grade`: A cached percentage, refreshed through `core.scoring` every time points change.
- `hypothetical_points`: A session-only what-if score. While set, it replaces `actual_points` in the grade.
- `to_dict()` / `from_dict()`: Used for persistence. What-if scores are never serialized.
- `from_import()`: Used when reading a course data file.
"""

from __future__ import annotations

import math
from typing import Any

import core.formatters as formatters
from core.scoring import assignment_grade
from core.utils import coerce_number, coerce_optional_number


class Assignment:

    def __init__(
        self,
        name: str,
        actual_points: float,
        possible_points: float,
        hypothetical_points: float | None = None,
    ):
        self._name = str(name)
        self._actual_points = coerce_number(actual_points, "Actual points")
        self._possible_points = coerce_number(possible_points, "Possible points")
        self._hypothetical_points = coerce_optional_number(
            hypothetical_points, "Hypothetical points"
        )
        self._grade = math.nan
        self._display_grade = ""
        self.recompute_grade()

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = str(name)

    @property
    def actual_points(self) -> float:
        return self._actual_points

    @actual_points.setter
    def actual_points(self, points: Any) -> None:
        self._actual_points = coerce_number(points, "Actual points")
        self.recompute_grade()

    @property
    def possible_points(self) -> float:
        return self._possible_points

    @possible_points.setter
    def possible_points(self, points: Any) -> None:
        self._possible_points = coerce_number(points, "Possible points")
        self.recompute_grade()

    @property
    def hypothetical_points(self) -> float | None:
        return self._hypothetical_points

    @hypothetical_points.setter
    def hypothetical_points(self, points: Any) -> None:
        self._hypothetical_points = coerce_optional_number(
            points, "Hypothetical points"
        )
        self.recompute_grade()

    @property
    def has_what_if(self) -> bool:
        return self._hypothetical_points is not None

    @property
    def grade(self) -> float:
        return self._grade

    @property
    def display_grade(self) -> str:
        return self._display_grade

    # === derived fields ===

    def recompute_grade(self) -> float:
        self._grade = assignment_grade(
            self._actual_points,
            self._possible_points,
            self._hypothetical_points,
        )
        self._display_grade = formatters.format_points(
            self._actual_points, self._possible_points
        )
        return self._grade

    # === persistence and import ===

    def to_dict(self) -> dict:
        # the stored grade never includes a what-if score
        grade = assignment_grade(self._actual_points, self._possible_points)

        return {
            "name": self._name,
            "actualPoints": self._actual_points,
            "possiblePoints": self._possible_points,
            "grade": grade if math.isfinite(grade) else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Assignment:
        # a stored "grade" is derived data and "hypotheticalPoints" is session-only, so both are ignored
        return cls(
            name=data["name"],
            actual_points=data["actualPoints"],
            possible_points=data["possiblePoints"],
        )

    @classmethod
    def from_import(cls, data: Any) -> Assignment:
        """
        Builds an `Assignment` from one entry of a course data file.

        Raises:
            TypeError: If the entry is not an object or a points field cannot be cast to float.
            KeyError: If a points field is missing.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected an assignment object, got: {data!r}")

        return cls(
            name=data.get("name", ""),
            actual_points=data["actualPoints"],
            possible_points=data["possiblePoints"],
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Assignment({self._name!r}, {self._actual_points}, {self._possible_points}, {self._hypothetical_points})"

    def __str__(self) -> str:
        return f"ASSIGNMENT: {self._name} - {self._display_grade}"
