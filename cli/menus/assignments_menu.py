# cli/menus/assignments_menu.py

"""
Category actions menu for the Gradebook CLI.

This module defines the interface for working inside a single category, including:
- Viewing assignments with their grades, sorted by name (numbers in natural order), score, or points possible
- Adding, editing, moving, and deleting assignments
- Trying out what-if scores and clearing them again
- Editing or deleting the category itself

Category-level actions are expressed as command objects and run through `Gradebook.execute()`.
What-if scores only last for the session and are never saved.
"""

import math
from typing import Any, Callable, cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.utils import natural_sort_key
from models.assignment import Assignment
from models.commands import (
    AddAssignment,
    ChangeCategory,
    DeleteAssignments,
    DeleteCategory,
    EditCategory,
)
from models.course import Course
from models.gradebook import Gradebook


def run(gradebook: Gradebook, course: Course, category_name: str) -> None:
    """
    Top-level loop with dispatch for the category actions menu.

    Args:
        gradebook (Gradebook): The active `Gradebook`.
        course (Course): The course owning the category.
        category_name (str): The category being managed.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - Every action returns the category name to continue with, which changes after a rename.
        - An action returning None means the category is gone, and the menu closes.
    """
    options = [
        ("View Assignments", view_assignments),
        ("Add Assignment", add_assignment),
        ("Edit Assignment", edit_assignment),
        ("Try a What-If Score", set_what_if),
        ("Clear What-If Scores", clear_what_ifs),
        ("Change Assignment(s) Category", change_category),
        ("Delete Assignment(s)", delete_assignments),
        ("Edit Category", edit_category),
        ("Delete Category", delete_category),
    ]
    zero_option = "Return to Manage Categories menu"

    current_name: str | None = category_name

    try:
        while current_name is not None:
            category = course.categories[current_name]
            title = formatters.format_banner_text(
                f"{current_name} - {formatters.format_percent(category.average)}"
            )
            menu_response = helpers.display_menu(title, options, zero_option)

            if menu_response is MenuSignal.EXIT:
                break

            elif callable(menu_response):
                current_name = menu_response(gradebook, course, current_name)

            else:
                raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    finally:
        helpers.prompt_if_dirty(gradebook)

    helpers.returning_to("Manage Categories menu")


def by_name(assignment: Assignment) -> Any:
    return natural_sort_key(assignment.name)


def by_score(assignment: Assignment) -> float:
    # ungraded assignments (NaN) sort below every real score
    return -math.inf if math.isnan(assignment.grade) else assignment.grade


def by_possible_points(assignment: Assignment) -> float:
    return assignment.possible_points


# (label, sort key, descending)
SORT_ORDERS: list[tuple[str, Callable[[Assignment], Any], bool]] = [
    ("Name (A to Z)", by_name, False),
    ("Name (Z to A)", by_name, True),
    ("Score (lowest first)", by_score, False),
    ("Score (highest first)", by_score, True),
    ("Out of (fewest points first)", by_possible_points, False),
    ("Out of (most points first)", by_possible_points, True),
]


def sorted_assignments(
    course: Course,
    category_name: str,
    sort_key: Callable[[Assignment], Any] = by_name,
    descending: bool = False,
) -> list[Assignment]:
    return sorted(
        course.categories[category_name].grades, key=sort_key, reverse=descending
    )


def prompt_sort_order() -> tuple[Callable[[Assignment], Any], bool]:
    """
    Asks how to order the assignment table. Choosing the zero option keeps name order.
    """
    title = formatters.format_banner_text("Sort Assignments")
    options = [
        (label, lambda k=sort_key, d=descending: (k, d))
        for label, sort_key, descending in SORT_ORDERS
    ]

    menu_response = helpers.display_menu(title, options, "Keep name order")

    if menu_response is MenuSignal.EXIT:
        return by_name, False

    return menu_response()


def view_assignments(gradebook: Gradebook, course: Course, category_name: str) -> str:
    category = course.categories[category_name]

    print(f"\n{model_formatters.format_category_multiline(category, course)}")

    if not category.grades:
        print("\nThis category has no assignments yet.")
        return category_name

    sort_key, descending = prompt_sort_order()

    print(f"\n{formatters.format_banner_text('Assignments')}")
    helpers.display_results(
        sorted_assignments(course, category_name, sort_key, descending),
        False,
        model_formatters.format_assignment_oneline,
    )

    return category_name


# === assignment actions ===


def add_assignment(gradebook: Gradebook, course: Course, category_name: str) -> str:
    name = helpers.prompt_user_input_or_cancel(
        "Enter assignment name (leave blank to cancel):"
    )

    if name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return category_name

    actual_points = helpers.prompt_number_or_cancel(
        "Enter points earned (leave blank to cancel):"
    )

    if actual_points is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return category_name

    possible_points = helpers.prompt_number_or_cancel(
        "Enter points possible (leave blank to cancel):"
    )

    if possible_points is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return category_name

    assignment = Assignment(
        cast(str, name), cast(float, actual_points), cast(float, possible_points)
    )

    gradebook_response = gradebook.execute(
        course, category_name, AddAssignment(assignment)
    )
    helpers.display_response(gradebook_response)

    return category_name


def edit_assignment(gradebook: Gradebook, course: Course, category_name: str) -> str:
    """
    Prompts the user to pick an assignment and enter a new name and points, keeping current values on blank input.
    """
    assignment = helpers.prompt_selection_from_list(
        sorted_assignments(course, category_name),
        "Assignments",
        model_formatters.format_assignment_oneline,
    )

    if assignment is None:
        return category_name

    name = helpers.prompt_user_input_or_none(
        f"Enter a new name (blank keeps '{assignment.name}'):"
    )
    actual_points = helpers.prompt_user_input_or_none(
        f"Enter points earned (blank keeps {formatters.format_number(assignment.actual_points)}):"
    )
    possible_points = helpers.prompt_user_input_or_none(
        f"Enter points possible (blank keeps {formatters.format_number(assignment.possible_points)}):"
    )

    if not helpers.confirm_make_change():
        helpers.returning_without_changes()
        return category_name

    gradebook_response = gradebook.edit_assignment(
        course.categories[category_name],
        assignment,
        name=name,
        actual_points=actual_points,
        possible_points=possible_points,
    )
    helpers.display_response(gradebook_response)

    return category_name


def set_what_if(gradebook: Gradebook, course: Course, category_name: str) -> str:
    """
    Prompts the user to pick an assignment and simulate a different score for it.

    Notes:
        - Entering 'clear' removes the simulated score from that assignment.
    """
    category = course.categories[category_name]

    assignment = helpers.prompt_selection_from_list(
        sorted_assignments(course, category_name),
        "Assignments",
        model_formatters.format_assignment_oneline,
    )

    if assignment is None:
        return category_name

    points = helpers.prompt_user_input_or_cancel(
        "Enter the what-if points earned ('clear' to remove, blank to cancel):"
    )

    if points is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return category_name

    hypothetical_points = None if cast(str, points).lower() == "clear" else points

    gradebook_response = gradebook.set_what_if(
        category, assignment, hypothetical_points
    )
    helpers.display_response(gradebook_response)

    if gradebook_response.success:
        print(
            f"Category average is now {formatters.format_percent(category.average)}; "
            f"course average is now {formatters.format_percent(course.weighted_average)}."
        )

    return category_name


def clear_what_ifs(gradebook: Gradebook, course: Course, category_name: str) -> str:
    helpers.display_response(gradebook.clear_what_if(course.categories[category_name]))
    return category_name


def change_category(gradebook: Gradebook, course: Course, category_name: str) -> str:
    """
    Moves the selected assignments to another category of the course.

    Notes:
        - The destination name is matched exactly after trimming whitespace; an unknown name is reported by the Gradebook.
    """
    selected = helpers.prompt_multiple_selection_from_list(
        sorted_assignments(course, category_name),
        "Assignments",
        model_formatters.format_assignment_oneline,
    )

    if selected:
        other_names = [name for name in course.categories if name != category_name]
        print(
            f"\nOther categories: {formatters.format_list_with_and(other_names) or '[NONE]'}"
        )

        destination = helpers.prompt_user_input_or_cancel(
            "What is the category you wish to move the assignment(s) to? (leave blank to cancel)"
        )

        if destination is MenuSignal.CANCEL:
            helpers.returning_without_changes()
            return category_name
    else:
        destination = ""

    gradebook_response = gradebook.execute(
        course,
        category_name,
        ChangeCategory(destination=cast(str, destination).strip(), assignments=selected),
    )
    helpers.display_response(gradebook_response)

    return category_name


def delete_assignments(gradebook: Gradebook, course: Course, category_name: str) -> str:
    selected = helpers.prompt_multiple_selection_from_list(
        sorted_assignments(course, category_name),
        "Assignments",
        model_formatters.format_assignment_oneline,
    )

    if selected and not helpers.confirm_action(
        "Are you sure you want to delete these assignments?"
    ):
        helpers.returning_without_changes()
        return category_name

    gradebook_response = gradebook.execute(
        course, category_name, DeleteAssignments(assignments=selected)
    )
    helpers.display_response(gradebook_response)

    return category_name


# === category actions ===


def edit_category(gradebook: Gradebook, course: Course, category_name: str) -> str:
    category = course.categories[category_name]

    print(f"\n{model_formatters.format_category_multiline(category, course)}")

    new_name = helpers.prompt_user_input_or_default(
        f"Enter the category name (blank keeps '{category_name}'):"
    )
    new_name = category_name if new_name is MenuSignal.DEFAULT else cast(str, new_name)

    weight, num_drops = helpers.prompt_weight_and_drops(category.weight, category.num_drops)

    gradebook_response = gradebook.execute(
        course,
        category_name,
        EditCategory(name=new_name, weight=weight, num_drops=num_drops),
    )
    helpers.display_response(gradebook_response)

    return new_name if gradebook_response.success else category_name


def delete_category(
    gradebook: Gradebook, course: Course, category_name: str
) -> str | None:
    category = course.categories[category_name]

    helpers.caution_banner()
    print(
        f"\nDeleting {category_name} also permanently deletes its {len(category.grades)} assignment(s)."
    )

    if not helpers.confirm_action(f"Are you sure you want to delete {category_name}?"):
        helpers.returning_without_changes()
        return category_name

    gradebook_response = gradebook.execute(course, category_name, DeleteCategory())
    helpers.display_response(gradebook_response)

    return None if gradebook_response.success else category_name
