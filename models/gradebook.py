# models/gradebook.py

"""
The Gradebook model is the central data object of the program and represents the "source of truth" for all data records.

It owns an ordered list of `Course` objects, each owning its `Category` objects, each owning its `Assignment` objects.
There are no shared references between courses, categories, or assignments.

Every mutating method validates its input first, returns a failed `Response` without changing anything if validation
fails, and otherwise applies the change, refreshes the affected averages, and persists the whole Gradebook to its
storage collaborator. What-if scores are the only exception: they change averages for the session and are not persisted.

Persistence failures never fail a mutation. They are logged, reported through `Response.warning`, and recorded in
`has_unsaved_changes` so the UI can offer to retry with `save()`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from core.config import SAVE_KEY
from core.response import ErrorCode, Response
from core.storage import KeyValueStore, QuotaExceededError, StorageError
from core.utils import coerce_count, coerce_number
from models.assignment import Assignment
from models.category import Category
from models.commands import (
    AddAssignment,
    ChangeCategory,
    Command,
    DeleteAssignments,
    DeleteCategory,
    EditCategory,
)
from models.course import Course

logger = logging.getLogger(__name__)

# errors raised while rebuilding models from stored or imported JSON
_DECODE_ERRORS = (KeyError, TypeError, ValueError, AttributeError)


class Gradebook:

    def __init__(self, storage: KeyValueStore | None = None):
        self._courses: list[Course] = []
        self._storage = storage
        self._unsaved_changes: bool = False

    # === properties ===

    @property
    def courses(self) -> list[Course]:
        return self._courses

    @property
    def storage(self) -> KeyValueStore | None:
        return self._storage

    @property
    def has_unsaved_changes(self) -> bool:
        return self._unsaved_changes

    # === public classmethods ===

    @classmethod
    def load(cls, storage: KeyValueStore | None) -> Response:
        """
        Creates a `Gradebook` bound to `storage` and populates it with any previously saved courses.

        Args:
            storage (KeyValueStore | None): The store to read from and persist to. None keeps the gradebook in memory only.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - Always True. Missing, unreadable, or malformed data yields an empty `Gradebook` instead of a failure.
                - detail (str | None):
                    - A human-readable summary of what was loaded.
                - warning (str | None):
                    - Set if the store could not be read or its data was discarded.
                - data (dict | None): Payload with the following keys:
                    - "gradebook" (Gradebook): The loaded `Gradebook` object.
                    - "discarded" (bool): True if stored data existed but was malformed and was dropped.

        Notes:
            - Dropped data is not erased from the store until the next successful persist overwrites it.
        """
        gradebook = cls(storage)

        if storage is None:
            return Response.succeed(
                detail="No storage configured. Starting with an empty gradebook.",
                data={"gradebook": gradebook, "discarded": False},
            )

        try:
            raw = storage.get(SAVE_KEY)

        except StorageError as e:
            logger.warning("Storage unavailable, continuing in memory only: %s", e)
            return Response.succeed(
                detail="Storage is unavailable. Starting with an empty gradebook.",
                data={"gradebook": gradebook, "discarded": False},
                warning=str(e),
            )

        if raw is None:
            return Response.succeed(
                detail="No saved courses found. Starting with an empty gradebook.",
                data={"gradebook": gradebook, "discarded": False},
            )

        try:
            gradebook._courses = cls.deserialize(raw)

        except _DECODE_ERRORS as e:
            logger.warning("Discarding malformed stored courses: %s", e)
            return Response.succeed(
                detail="Saved courses were malformed and have been discarded.",
                data={"gradebook": gradebook, "discarded": True},
                warning=f"Malformed stored data: {e}",
            )

        logger.info("Loaded %d course(s) from storage", len(gradebook.courses))

        return Response.succeed(
            detail=f"Loaded {len(gradebook.courses)} course(s).",
            data={"gradebook": gradebook, "discarded": False},
        )

    # === persistence and import ===

    def serialize(self) -> str:
        return json.dumps([course.to_dict() for course in self._courses])

    @staticmethod
    def deserialize(raw: str | bytes) -> list[Course]:
        """
        Rebuilds the course list from serialized storage data.

        Raises:
            ValueError: If the data is not valid JSON or not a list of course objects.
            KeyError, TypeError, AttributeError: If a course, category, or assignment is missing or mistyped.
        """
        data = json.loads(raw)

        if not isinstance(data, list):
            raise ValueError("Stored courses must be a JSON array.")

        courses = []
        for course_data in data:
            if not isinstance(course_data, dict):
                raise ValueError(f"Expected a course object, got: {course_data!r}")
            courses.append(Course.from_dict(course_data))

        return courses

    def save(self) -> Response:
        """
        Serializes the whole gradebook and writes it to storage.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the data was written.
                    - False if there is no storage, the storage is unavailable, or the quota is exceeded.
                - detail (str | None):
                    - A human-readable description of the result.
                - error (ErrorCode | str | None):
                    - `ErrorCode.STORAGE_UNAVAILABLE` if no store is configured or it cannot be written.
                    - `ErrorCode.QUOTA_EXCEEDED` if the store rejects the write for size.
                    - `ErrorCode.INTERNAL_ERROR` if serialization fails.
                - status_code (int | None):
                    - 200 on success
                    - 503 for storage failures
                    - 400 for other failures

        Notes:
            - This method never raises. The in-memory gradebook is unchanged either way.
        """
        if self._storage is None:
            self._mark_dirty()
            return Response.fail(
                detail="No storage is configured. Changes are kept in memory only.",
                error=ErrorCode.STORAGE_UNAVAILABLE,
                status_code=503,
            )

        try:
            self._storage.set(SAVE_KEY, self.serialize())

        except QuotaExceededError as e:
            self._mark_dirty()
            return Response.fail(
                detail=f"Storage quota exceeded: {e}",
                error=ErrorCode.QUOTA_EXCEEDED,
                status_code=503,
            )

        except StorageError as e:
            self._mark_dirty()
            return Response.fail(
                detail=f"Storage unavailable: {e}",
                error=ErrorCode.STORAGE_UNAVAILABLE,
                status_code=503,
            )

        except (TypeError, ValueError) as e:
            self._mark_dirty()
            return Response.fail(
                detail=f"Failed to serialize gradebook: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            self._unsaved_changes = False
            return Response.succeed(detail="Gradebook successfully saved.")

    def _persist(self) -> str | None:
        """
        Saves after a mutation, downgrading any failure to a logged warning.

        Returns:
            The failure detail if the save failed, otherwise None.
        """
        save_response = self.save()

        if save_response.success:
            return None

        logger.warning("Changes not persisted: %s", save_response.detail)
        return save_response.detail

    def _mark_dirty(self) -> None:
        self._unsaved_changes = True

    # === course manipulation ===

    def import_course(
        self, name: str, credits: Any, raw_categories: str | bytes
    ) -> Response:
        """
        Parses a course data file and appends the resulting `Course` to the gradebook.

        Args:
            name (str): The course name.
            credits (Any): The course credit count, coerced to float.
            raw_categories (str | bytes): The file contents, a JSON object mapping category names to
                `{weight?, numDrops?, grades: [{name, actualPoints, possiblePoints}]}`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the course was imported.
                    - False if the data is malformed in any way.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.MALFORMED_IMPORT` if the data is not a JSON object or cannot be coerced.
                    - `ErrorCode.INVALID_FIELD_VALUE` if the credit count is not a number.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Course): The imported `Course` object.

        Notes:
            - The import is all-or-nothing: no course is added if any part of the file is malformed.
            - Building each `Assignment` precomputes its grade and display grade.
        """
        try:
            parsed = json.loads(raw_categories)

        except ValueError as e:
            return Response.fail(
                detail=f"Course data is not well-formed JSON: {e}",
                error=ErrorCode.MALFORMED_IMPORT,
            )

        if not isinstance(parsed, dict):
            return Response.fail(
                detail="Course data must be a JSON object of categories.",
                error=ErrorCode.MALFORMED_IMPORT,
            )

        try:
            coerce_number(credits if credits not in (None, "") else 0, "Credits")

        except TypeError as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        try:
            course = Course.from_import(name, credits, parsed)

        except _DECODE_ERRORS as e:
            return Response.fail(
                detail=f"Course data is malformed: {e}",
                error=ErrorCode.MALFORMED_IMPORT,
            )

        self._courses.append(course)
        logger.info(
            "Imported course %r with %d categories", course.name, len(course.categories)
        )

        return Response.succeed(
            detail=f"Course {course.name} successfully imported.",
            data={"record": course},
            warning=self._persist(),
        )

    def delete_course(self, index: int) -> Response:
        """
        Removes the course at `index`.

        Returns:
            Response: On success, data["record"] holds the removed `Course`.
                Fails with `ErrorCode.INDEX_OUT_OF_RANGE` (404) if there is no course at that position.
        """
        if (
            not isinstance(index, int)
            or isinstance(index, bool)
            or not 0 <= index < len(self._courses)
        ):
            return Response.fail(
                detail=f"No course at position {index}.",
                error=ErrorCode.INDEX_OUT_OF_RANGE,
                status_code=404,
            )

        course = self._courses.pop(index)
        logger.info("Deleted course %r", course.name)

        return Response.succeed(
            detail=f"Course {course.name} successfully deleted.",
            data={"record": course},
            warning=self._persist(),
        )

    def find_course_by_name(self, name: str) -> Response:
        """
        Finds the first course whose name matches `name`, ignoring case and surrounding whitespace.

        Returns:
            Response: On success, data["record"] holds the `Course`. Fails with `ErrorCode.NOT_FOUND` (404) otherwise.

        Notes:
            - This method is read-only.
        """
        normalized = self._normalize(name)

        for course in self._courses:
            if self._normalize(course.name) == normalized:
                return Response.succeed(data={"record": course})

        return Response.fail(
            detail=f"No course named '{name}'.",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    # === category manipulation ===

    def add_category(
        self,
        course: Course,
        name: str,
        weight: Any = None,
        num_drops: Any = 0,
    ) -> Response:
        """
        Adds a new, empty `Category` to a course.

        Args:
            course (Course): The course receiving the category.
            name (str): The category name, which must not already exist in the course.
            weight (Any): The percentage weight, or None if unweighted.
            num_drops (Any): How many of the lowest grades to drop.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the category was added.
                    - False if the name already exists or a value cannot be coerced.
                - error (ErrorCode | str | None):
                    - `ErrorCode.DUPLICATE_CATEGORY` if the name is taken.
                    - `ErrorCode.INVALID_FIELD_VALUE` if the weight or drop count is invalid.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Category): The added `Category` object.

        Notes:
            - On failure `course.categories` is left unchanged.
        """
        try:
            course.require_unique_category_name(name)

        except ValueError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.DUPLICATE_CATEGORY,
            )

        try:
            category = Category(name, weight, num_drops)

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        course.add_category(category)

        return Response.succeed(
            detail=f"Category {name} successfully added to {course.name}.",
            data={"record": category},
            warning=self._persist(),
        )

    def edit_category(
        self,
        course: Course,
        name: str,
        new_name: str,
        weight: Any = None,
        num_drops: Any = 0,
    ) -> Response:
        """
        Renames a category and replaces its weight and drop count.

        Args:
            course (Course): The course owning the category.
            name (str): The current category name.
            new_name (str): The new category name. Equal to `name` to keep it.
            weight (Any): The new weight, or None if unweighted.
            num_drops (Any): The new drop count.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the category was updated.
                    - False if the category is unknown, the new name is taken, or a value cannot be coerced.
                - error (ErrorCode | str | None):
                    - `ErrorCode.UNKNOWN_CATEGORY` if `name` is not a category of the course.
                    - `ErrorCode.DUPLICATE_CATEGORY` if `new_name` belongs to another category.
                    - `ErrorCode.INVALID_FIELD_VALUE` if the weight or drop count is invalid.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Category): The updated `Category` object (same object, same grades list).

        Notes:
            - A rename replaces the mapping key in place, keeping the category's display position.
            - The average is recomputed because a new drop count can change it.
        """
        try:
            category = course.get_category(name)

        except KeyError as e:
            return Response.fail(
                detail=str(e.args[0]),
                error=ErrorCode.UNKNOWN_CATEGORY,
                status_code=404,
            )

        try:
            weight = Category.validate_weight_input(weight)
            num_drops = coerce_count(num_drops, "Number of drops")

        except (TypeError, ValueError) as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        if new_name != name:
            try:
                course.rename_category(name, new_name)

            except ValueError as e:
                return Response.fail(
                    detail=str(e),
                    error=ErrorCode.DUPLICATE_CATEGORY,
                )

        category.weight = weight
        category.num_drops = num_drops
        category.recompute_average()

        return Response.succeed(
            detail=f"Category {category.name} successfully updated.",
            data={"record": category},
            warning=self._persist(),
        )

    def delete_category(self, course: Course, name: str) -> Response:
        """
        Removes a category and all of its assignments from a course.

        Returns:
            Response: On success, data["record"] holds the removed `Category` with its assignments intact, so
                a caller may offer to restore them. Fails with `ErrorCode.UNKNOWN_CATEGORY` (404) if `name` is not
                a category of the course.

        Notes:
            - The assignments are not moved anywhere else; they leave the gradebook with the category.
        """
        try:
            category = course.remove_category(name)

        except KeyError as e:
            return Response.fail(
                detail=str(e.args[0]),
                error=ErrorCode.UNKNOWN_CATEGORY,
                status_code=404,
            )

        logger.info(
            "Deleted category %r (%d assignments) from %r",
            name,
            len(category.grades),
            course.name,
        )

        return Response.succeed(
            detail=f"Category {name} successfully removed from {course.name}.",
            data={"record": category},
            warning=self._persist(),
        )

    # === assignment manipulation ===

    def add_assignment(self, category: Category, assignment: Assignment) -> Response:
        """
        Appends an `Assignment` to a category and refreshes the category average.

        Returns:
            Response: On success, data["record"] holds the added `Assignment`.
                Fails with `ErrorCode.DUPLICATE_ASSIGNMENT` if the category already holds this assignment object.
        """
        if category.contains(assignment):
            return Response.fail(
                detail=f"Assignment {assignment.name} is already in {category.name}.",
                error=ErrorCode.DUPLICATE_ASSIGNMENT,
            )

        category.append_assignment(assignment)

        return Response.succeed(
            detail=f"Assignment {assignment.name} successfully added to {category.name}.",
            data={"record": assignment},
            warning=self._persist(),
        )

    def edit_assignment(
        self,
        category: Category,
        assignment: Assignment,
        name: str | None = None,
        actual_points: Any = None,
        possible_points: Any = None,
    ) -> Response:
        """
        Updates the name and points of an assignment in place.

        Args:
            category (Category): The category owning the assignment.
            assignment (Assignment): The assignment to edit.
            name (str | None): The new name, or None to keep it.
            actual_points (Any): The new earned points, or None to keep them.
            possible_points (Any): The new possible points, or None to keep them.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the assignment was updated.
                    - False if the assignment is not in the category or a points value cannot be coerced.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INDEX_OUT_OF_RANGE` if the assignment is not in the category.
                    - `ErrorCode.INVALID_FIELD_VALUE` if a points value is not a number.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Assignment): The updated `Assignment` object.

        Notes:
            - All values are coerced before any field is written, so a failure changes nothing.
        """
        if not category.contains(assignment):
            return self._not_in_category(category)

        try:
            new_actual = (
                coerce_number(actual_points, "Actual points")
                if actual_points is not None
                else assignment.actual_points
            )
            new_possible = (
                coerce_number(possible_points, "Possible points")
                if possible_points is not None
                else assignment.possible_points
            )

        except TypeError as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        if name is not None:
            assignment.name = name
        assignment.actual_points = new_actual
        assignment.possible_points = new_possible
        category.recompute_average()

        return Response.succeed(
            detail=f"Assignment {assignment.name} successfully updated.",
            data={"record": assignment},
            warning=self._persist(),
        )

    def set_what_if(
        self,
        category: Category,
        assignment: Assignment,
        hypothetical_points: Any,
    ) -> Response:
        """
        Sets or clears a what-if score on an assignment and refreshes the category average.

        Args:
            category (Category): The category owning the assignment.
            assignment (Assignment): The assignment to simulate.
            hypothetical_points (Any): The simulated earned points, or None to clear the simulation.

        Returns:
            Response: On success, data["record"] holds the `Assignment`. Fails with `ErrorCode.INDEX_OUT_OF_RANGE`
                if the assignment is not in the category, or `ErrorCode.INVALID_FIELD_VALUE` if the points are not a number.

        Notes:
            - What-if scores are session-only. This method does not persist, and they are never serialized.
        """
        if not category.contains(assignment):
            return self._not_in_category(category)

        try:
            assignment.hypothetical_points = hypothetical_points

        except TypeError as e:
            return Response.fail(
                detail=f"Invalid field value: {e}",
                error=ErrorCode.INVALID_FIELD_VALUE,
            )

        category.recompute_average()

        return Response.succeed(
            detail=(
                f"What-if score cleared for {assignment.name}."
                if not assignment.has_what_if
                else f"What-if score for {assignment.name} set to {assignment.hypothetical_points}."
            ),
            data={"record": assignment},
        )

    def clear_what_if(self, category: Category) -> Response:
        cleared = category.clear_what_ifs()

        return Response.succeed(
            detail=f"Cleared {cleared} what-if score(s) in {category.name}.",
            data={"cleared": cleared},
        )

    def delete_assignments(
        self, category: Category, assignments: Iterable[Assignment]
    ) -> Response:
        """
        Removes a batch of assignments from a category.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every assignment was removed.
                    - False if the selection is empty or any assignment is not in the category.
                - error (ErrorCode | str | None):
                    - `ErrorCode.EMPTY_SELECTION` if no assignments are given.
                    - `ErrorCode.INDEX_OUT_OF_RANGE` if any assignment is not in the category.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (list[Assignment]): The removed assignments.

        Notes:
            - Nothing is removed unless every assignment is found.
            - Removing the last assignment leaves the category average as None.
        """
        assignments = list(assignments)

        if not assignments:
            return self._empty_selection()

        try:
            removed = category.remove_assignments(assignments)

        except IndexError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.INDEX_OUT_OF_RANGE,
                status_code=404,
            )

        return Response.succeed(
            detail=f"{len(removed)} assignment(s) successfully removed from {category.name}.",
            data={"records": removed},
            warning=self._persist(),
        )

    def move_assignments(
        self,
        course: Course,
        from_name: str,
        to_name: str,
        assignments: Iterable[Assignment],
    ) -> Response:
        """
        Moves a batch of assignments from one category of a course to another.

        Args:
            course (Course): The course owning both categories.
            from_name (str): The source category name.
            to_name (str): The destination category name.
            assignments (Iterable[Assignment]): The assignments to move.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every assignment was moved.
                    - False if the selection is empty, a category is unknown, or an assignment is not in the source.
                - error (ErrorCode | str | None):
                    - `ErrorCode.EMPTY_SELECTION` if no assignments are given.
                    - `ErrorCode.UNKNOWN_CATEGORY` if either category name is not a key of the course.
                    - `ErrorCode.INDEX_OUT_OF_RANGE` if any assignment is not in the source category.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (list[Assignment]): The moved assignments.

        Notes:
            - Moved assignments are appended to the destination in their source order.
            - Both averages are recomputed and the gradebook is persisted once for the whole batch.
            - A failure moves nothing.
        """
        assignments = list(assignments)

        if not assignments:
            return self._empty_selection()

        for category_name in (from_name, to_name):
            if category_name not in course.categories:
                return Response.fail(
                    detail=f"No category named '{category_name}' in {course.name}.",
                    error=ErrorCode.UNKNOWN_CATEGORY,
                    status_code=404,
                )

        if from_name == to_name:
            return Response.succeed(
                detail="The destination matches the current category. No changes made.",
                data={"records": []},
            )

        try:
            moved = course.move_assignments(from_name, to_name, assignments)

        except IndexError as e:
            return Response.fail(
                detail=str(e),
                error=ErrorCode.INDEX_OUT_OF_RANGE,
                status_code=404,
            )

        return Response.succeed(
            detail=f"{len(moved)} assignment(s) successfully moved to {to_name}.",
            data={"records": moved},
            warning=self._persist(),
        )

    # === command dispatch ===

    def execute(self, course: Course, category_name: str, command: Command) -> Response:
        """
        Runs a category action against the named category of a course.

        Args:
            course (Course): The course owning the category.
            category_name (str): The category the action targets.
            command (Command): One of `AddAssignment`, `ChangeCategory`, `DeleteAssignments`, `EditCategory`, `DeleteCategory`.

        Returns:
            Response: The response of the Gradebook mutator the command maps onto.
                Fails with `ErrorCode.UNKNOWN_CATEGORY` if the category does not exist,
                or `ErrorCode.LOGIC_ERROR` for an unrecognized command.
        """
        if category_name not in course.categories:
            return Response.fail(
                detail=f"No category named '{category_name}' in {course.name}.",
                error=ErrorCode.UNKNOWN_CATEGORY,
                status_code=404,
            )

        category = course.categories[category_name]

        match command:
            case AddAssignment(assignment=assignment):
                return self.add_assignment(category, assignment)

            case ChangeCategory(destination=destination, assignments=assignments):
                return self.move_assignments(
                    course, category_name, destination, assignments
                )

            case DeleteAssignments(assignments=assignments):
                return self.delete_assignments(category, assignments)

            case EditCategory(name=new_name, weight=weight, num_drops=num_drops):
                return self.edit_category(
                    course, category_name, new_name, weight, num_drops
                )

            case DeleteCategory():
                return self.delete_category(course, category_name)

            case _:
                return Response.fail(
                    detail=f"Unrecognized command: {command!r}",
                    error=ErrorCode.LOGIC_ERROR,
                )

    # === helper methods ===

    def _not_in_category(self, category: Category) -> Response:
        return Response.fail(
            detail=f"The assignment is not in the category '{category.name}'.",
            error=ErrorCode.INDEX_OUT_OF_RANGE,
            status_code=404,
        )

    def _empty_selection(self) -> Response:
        return Response.fail(
            detail="You must select at least one assignment to complete this action.",
            error=ErrorCode.EMPTY_SELECTION,
        )

    def _normalize(self, input: str) -> str:
        return input.strip().lower()

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Gradebook({[c.name for c in self._courses]})"
