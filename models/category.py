# models/category.py

"""
Represents a grade category within a Course.

Each `Category` owns an ordered list of `Assignment` records and carries an optional weight used for the
weighted course average. A category without a weight has not been configured yet and is left out of the
course average entirely.

Key behaviors:
- `weight`: A float, or None if unweighted.
- `num_drops`: How many of the lowest assignment grades to leave out of `average`.
- `average`: A cached mean of assignment grades, None while the category is empty.
  It is refreshed by `recompute_average()`, which every mutation of `grades` must call.
- `to_dict()` / `from_dict()`: Used for persistence. The category name is the key of the owning course's
  mapping, so it is passed in separately when loading.

Notes:
- Assignment lookup and removal compare by identity, never by equality.
"""

from __future__ import annotations

import math
from typing import Any, Iterable

from core.scoring import category_average
from core.utils import coerce_count, coerce_optional_number
from models.assignment import Assignment


class Category:

    def __init__(
        self,
        name: str,
        weight: float | None = None,
        num_drops: int = 0,
        grades: list[Assignment] | None = None,
    ):
        self._name = name
        # weight and num_drops use setter methods for type coercion
        self.weight = weight
        self.num_drops = num_drops
        self._grades: list[Assignment] = grades if grades is not None else []
        self._average: float | None = None
        self.recompute_average()

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = name

    @property
    def weight(self) -> float | None:
        return self._weight

    @weight.setter
    def weight(self, weight: Any) -> None:
        self._weight = Category.validate_weight_input(weight)

    @property
    def num_drops(self) -> int:
        return self._num_drops

    @num_drops.setter
    def num_drops(self, num_drops: Any) -> None:
        self._num_drops = coerce_count(num_drops, "Number of drops")

    @property
    def is_weighted(self) -> bool:
        return self._weight is not None

    @property
    def grades(self) -> list[Assignment]:
        return self._grades

    @property
    def average(self) -> float | None:
        return self._average

    # === derived fields ===

    def recompute_average(self) -> float | None:
        self._average = category_average(
            (a.grade for a in self._grades), self._num_drops
        )
        return self._average

    # === assignment bookkeeping ===

    def contains(self, assignment: Assignment) -> bool:
        return any(a is assignment for a in self._grades)

    def append_assignment(self, assignment: Assignment) -> None:
        self._grades.append(assignment)
        self.recompute_average()

    def remove_assignments(self, assignments: Iterable[Assignment]) -> list[Assignment]:
        """
        Removes every given assignment from `grades` and refreshes `average`.

        Returns:
            The removed assignments, in their original order within the category.

        Raises:
            IndexError: If any of the assignments is not in this category. Nothing is removed in that case.
        """
        targets = {id(a) for a in assignments}
        removed = [a for a in self._grades if id(a) in targets]

        if {id(a) for a in removed} != targets:
            raise IndexError(
                f"One or more assignments are not in the category '{self._name}'."
            )

        self._grades[:] = [a for a in self._grades if id(a) not in targets]
        self.recompute_average()

        return removed

    def clear_what_ifs(self) -> int:
        cleared = 0

        for assignment in self._grades:
            if assignment.has_what_if:
                assignment.hypothetical_points = None
                cleared += 1

        self.recompute_average()

        return cleared

    # === persistence and import ===

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "numDrops": self._num_drops,
            "grades": [a.to_dict() for a in self._grades],
        }

        if self._weight is not None:
            data["weight"] = self._weight

        return data

    @classmethod
    def from_dict(cls, name: str, data: dict) -> Category:
        return cls(
            name=name,
            weight=data.get("weight"),
            num_drops=data.get("numDrops", 0),
            grades=[Assignment.from_dict(a) for a in data["grades"]],
        )

    @classmethod
    def from_import(cls, name: str, data: Any) -> Category:
        """
        Builds a `Category` from one entry of a course data file.

        Raises:
            TypeError: If the entry or its grades are not the expected JSON types, or a number cannot be coerced.
            KeyError: If an assignment entry is missing a points field.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected an object for category '{name}', got: {data!r}")

        grades = data.get("grades", [])

        if not isinstance(grades, list):
            raise TypeError(f"Expected a list of grades for category '{name}'.")

        return cls(
            name=name,
            weight=data.get("weight"),
            num_drops=data.get("numDrops", 0),
            grades=[Assignment.from_import(a) for a in grades],
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Category({self._name!r}, {self._weight}, {self._num_drops}, {len(self._grades)} grades)"

    def __str__(self) -> str:
        return f"CATEGORY: name: {self._name}, weight: {self._weight}, drops: {self._num_drops}"

    # === data validators ===

    @staticmethod
    def validate_weight_input(weight: Any) -> float | None:
        """
        Validates and normalizes input for a `Category` weight.

        Accepts None (or a blank string) as "unweighted", otherwise:
            - Casts to float.
            - Ensures the number is finite.

        Raises:
            TypeError: If the input is not None and cannot be cast to float.
            ValueError: If the input is non-finite.
        """
        weight = coerce_optional_number(weight, "Weight")

        if weight is not None and not math.isfinite(weight):
            raise ValueError("Weight must be a finite number.")

        return weight
