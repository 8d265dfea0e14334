# cli/menus/categories_menu.py

"""
Manage Categories menu for the Gradebook CLI.

This module lists the categories of one course with their weights and averages, adds new categories,
and hands a selected category to the category actions menu.

All operations are routed through the `Gradebook` API, which validates, recomputes averages, and persists.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import assignments_menu
from models.course import Course
from models.gradebook import Gradebook


def run(gradebook: Gradebook, course: Course) -> None:
    """
    Top-level loop with dispatch for the Manage Categories menu.

    Args:
        gradebook (Gradebook): The active `Gradebook`.
        course (Course): The course being managed.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    options = [
        ("View Categories", view_categories),
        ("Add Category", add_category),
        ("Manage Category", find_and_manage_category),
    ]
    zero_option = "Return to Courses menu"

    try:
        while True:
            title = formatters.format_banner_text(
                f"{course.name} - {formatters.format_percent(course.weighted_average)}"
            )
            menu_response = helpers.display_menu(title, options, zero_option)

            if menu_response is MenuSignal.EXIT:
                break

            elif callable(menu_response):
                menu_response(gradebook, course)

            else:
                raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    finally:
        helpers.prompt_if_dirty(gradebook)

    helpers.returning_to("Courses menu")


def view_categories(gradebook: Gradebook, course: Course) -> None:
    print(f"\n{model_formatters.format_course_multiline(course)}")

    if not course.categories:
        print("\nThis course has no categories yet.")
        return

    print(f"\n{formatters.format_banner_text('Categories')}")
    helpers.display_results(
        course.categories.values(), False, model_formatters.format_category_oneline
    )


# === add category ===


def add_category(gradebook: Gradebook, course: Course) -> None:
    """
    Prompts for a new category's name, weight, and drop count, then adds it to the course.

    Notes:
        - Name uniqueness is enforced by the Gradebook, which reports a duplicate without changing anything.
    """
    name = helpers.prompt_user_input_or_cancel(
        "Enter category name (leave blank to cancel):"
    )

    if name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    weight, num_drops = helpers.prompt_weight_and_drops(None, 0)

    gradebook_response = gradebook.add_category(
        course, cast(str, name), weight, num_drops
    )
    helpers.display_response(gradebook_response)


# === manage category ===


def find_and_manage_category(gradebook: Gradebook, course: Course) -> None:
    category = helpers.prompt_selection_from_list(
        list(course.categories.values()),
        "Categories",
        model_formatters.format_category_oneline,
    )

    if category is None:
        return

    assignments_menu.run(gradebook, course, category.name)
