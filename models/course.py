# models/course.py

"""
Represents a single course tracked by the Gradebook.

A `Course` owns a mapping of category name to `Category`. Category names are unique within a course, and
the mapping keeps insertion order for display.

Key behaviors:
- `weighted_average`: The course grade, computed from weighted category averages via `core.scoring`.
- `add_category()`, `rename_category()`, `remove_category()`, `move_assignments()`: Structural mutations
  that raise before changing anything when their preconditions fail.
- `to_dict()` / `from_dict()`: Used for persistence.
- `from_import()`: Used when reading a course data file.
"""

from __future__ import annotations

from typing import Any, Iterable

from core.scoring import weighted_average
from core.utils import coerce_number, rename_key
from models.assignment import Assignment
from models.category import Category


class Course:

    def __init__(
        self,
        name: str,
        credits: float = 0.0,
        categories: dict[str, Category] | None = None,
    ):
        self._name = name
        self._credits = coerce_number(credits, "Credits")
        self._categories: dict[str, Category] = categories or {}

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def credits(self) -> float:
        return self._credits

    @property
    def categories(self) -> dict[str, Category]:
        return self._categories

    @property
    def weighted_average(self) -> float:
        """
        The weighted course average, or NaN if no category has both a weight and an average.
        """
        return weighted_average(
            (c.weight, c.average) for c in self._categories.values()
        )

    # === category bookkeeping ===

    def get_category(self, name: str) -> Category:
        """
        Raises:
            KeyError: If no category with that name exists.
        """
        try:
            return self._categories[name]

        except KeyError:
            raise KeyError(f"No category named '{name}' in {self._name}.")

    def add_category(self, category: Category) -> None:
        """
        Raises:
            ValueError: If a category with the same name already exists.
        """
        self.require_unique_category_name(category.name)
        self._categories[category.name] = category

    def rename_category(self, old_name: str, new_name: str) -> Category:
        """
        Moves a category to a new key, keeping its position, grades, and settings.

        Raises:
            KeyError: If `old_name` does not exist.
            ValueError: If `new_name` belongs to another category.
        """
        category = self.get_category(old_name)

        if new_name != old_name:
            self.require_unique_category_name(new_name)
            rename_key(self._categories, old_name, new_name)
            category.name = new_name

        return category

    def remove_category(self, name: str) -> Category:
        """
        Raises:
            KeyError: If no category with that name exists.
        """
        category = self.get_category(name)
        del self._categories[name]
        return category

    def move_assignments(
        self, from_name: str, to_name: str, assignments: Iterable[Assignment]
    ) -> list[Assignment]:
        """
        Moves assignments from one category to the end of another, refreshing both averages.

        Returns:
            The moved assignments in their original order.

        Raises:
            KeyError: If either category does not exist.
            IndexError: If any assignment is not in the source category.

        Notes:
            - All checks run before anything is moved, so a failure never leaves a partial move.
        """
        source = self.get_category(from_name)
        destination = self.get_category(to_name)

        assignments = list(assignments)

        if source is destination:
            if not all(source.contains(a) for a in assignments):
                raise IndexError(
                    f"One or more assignments are not in the category '{from_name}'."
                )
            return assignments

        moved = source.remove_assignments(assignments)

        for assignment in moved:
            destination.append_assignment(assignment)

        return moved

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "name": self._name,
            "credits": self._credits,
            "categories": {
                name: category.to_dict() for name, category in self._categories.items()
            },
        }

    @classmethod
    def from_dict(cls, data: dict) -> Course:
        categories = data["categories"]

        if not isinstance(categories, dict):
            raise TypeError("Course categories must be an object.")

        return cls(
            name=data["name"],
            credits=data.get("credits") or 0,
            categories={
                name: Category.from_dict(name, category)
                for name, category in categories.items()
            },
        )

    @classmethod
    def from_import(cls, name: str, credits: Any, data: Any) -> Course:
        """
        Builds a `Course` from the parsed contents of a course data file.

        Raises:
            TypeError: If the data is not an object or any nested value cannot be coerced.
            KeyError: If an assignment entry is missing a points field.
        """
        if not isinstance(data, dict):
            raise TypeError("Course data must be a JSON object of categories.")

        return cls(
            name=name,
            credits=credits if credits not in (None, "") else 0,
            categories={
                category_name: Category.from_import(category_name, category)
                for category_name, category in data.items()
            },
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Course({self._name!r}, {self._credits}, {list(self._categories)})"

    def __str__(self) -> str:
        return f"COURSE: {self._name} ({self._credits} credits)"

    # === data validators ===

    def require_unique_category_name(self, name: str) -> None:
        """
        Raises:
            ValueError: If a category with the same name already exists.
        """
        if name in self._categories:
            raise ValueError(
                f"A category with the name '{name}' already exists in {self._name}."
            )
