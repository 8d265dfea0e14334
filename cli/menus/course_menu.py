# cli/menus/course_menu.py

"""
Courses menu for the Gradebook CLI.

Lists every course with its weighted average, imports new courses from course data files, removes courses,
and hands a selected course to the Manage Categories menu.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import categories_menu
from models.course import Course
from models.gradebook import Gradebook


def run(gradebook: Gradebook) -> None:
    """
    Top-level loop with dispatch for the Courses menu.

    Args:
        gradebook (Gradebook): The active `Gradebook`.

    Raises:
        RuntimeError: If the menu response is unrecognized.

    Notes:
        - The finally block guarantees a check for unsaved changes before returning.
    """
    title = formatters.format_banner_text("Courses")
    options = [
        ("View Courses", view_courses),
        ("Import Course", import_course),
        ("Manage Course", find_and_manage_course),
        ("Delete Course", find_and_delete_course),
        ("Save Gradebook", save_gradebook),
    ]
    zero_option = "Return to Start Menu"

    try:
        while True:
            menu_response = helpers.display_menu(title, options, zero_option)

            if menu_response is MenuSignal.EXIT:
                break

            elif callable(menu_response):
                menu_response(gradebook)

            else:
                raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")

    finally:
        helpers.prompt_if_dirty(gradebook)

    helpers.returning_to("Start Menu")


def view_courses(gradebook: Gradebook) -> None:
    if not gradebook.courses:
        print("\nThere are no courses yet. Import a course data file to get started.")
        return

    print(f"\n{formatters.format_banner_text('All Courses')}")
    helpers.display_results(gradebook.courses, True, model_formatters.format_course_oneline)


# === import course ===


def import_course(gradebook: Gradebook) -> None:
    """
    Prompts for a course name, credit count, and course data file, then imports the course.

    Notes:
        - The file is read completely before the Gradebook parses it.
        - A malformed file is rejected as a whole; no partial course is created.
    """
    name = helpers.prompt_user_input_or_cancel(
        "Enter the course name (e.g. CS 161, leave blank to cancel):"
    )

    if name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    credits = helpers.prompt_user_input_or_none(
        "Enter the number of credits (leave blank for none):"
    )

    file_path = helpers.prompt_user_input_or_cancel(
        "Enter the path to the course data JSON file (leave blank to cancel):"
    )

    if file_path is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    try:
        with open(cast(str, file_path).strip("\"'"), "rb") as f:
            contents = f.read()

    except OSError as e:
        print(f"\n[ERROR] Could not read the course data file: {e}")
        return

    gradebook_response = gradebook.import_course(cast(str, name), credits, contents)
    helpers.display_response(gradebook_response)

    if gradebook_response.success:
        course = gradebook_response.data["record"]
        print(model_formatters.format_course_multiline(course))


# === manage and delete course ===


def prompt_find_course(gradebook: Gradebook) -> Course | MenuSignal:
    """
    Prompts the user to locate a `Course` by name or list selection.

    Returns:
        Course | MenuSignal: The selected `Course`, or `MenuSignal.CANCEL` if canceled or nothing matches.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Course Selection")
    options = [
        ("Search for a course by name", find_course_by_search),
        ("Select from all courses", find_course_from_list),
    ]
    zero_option = "Return and cancel"

    menu_response = helpers.display_menu(title, options, zero_option)

    if menu_response is MenuSignal.EXIT:
        return MenuSignal.CANCEL
    elif callable(menu_response):
        return menu_response(gradebook)
    else:
        raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def find_course_by_search(gradebook: Gradebook) -> Course | MenuSignal:
    name = helpers.prompt_user_input_or_cancel(
        "Enter the course name (leave blank to cancel):"
    )

    if name is MenuSignal.CANCEL:
        return MenuSignal.CANCEL

    gradebook_response = gradebook.find_course_by_name(cast(str, name))

    if not gradebook_response.success:
        helpers.display_response(gradebook_response)
        return MenuSignal.CANCEL

    return gradebook_response.data["record"]


def find_course_from_list(gradebook: Gradebook) -> Course | MenuSignal:
    course = helpers.prompt_selection_from_list(
        gradebook.courses, "Courses", model_formatters.format_course_oneline
    )

    return MenuSignal.CANCEL if course is None else course


def find_and_manage_course(gradebook: Gradebook) -> None:
    course_input = prompt_find_course(gradebook)

    if course_input is MenuSignal.CANCEL:
        return

    categories_menu.run(gradebook, cast(Course, course_input))


def find_and_delete_course(gradebook: Gradebook) -> None:
    """
    Prompts the user to select a course and permanently deletes it after confirmation.
    """
    course_input = prompt_find_course(gradebook)

    if course_input is MenuSignal.CANCEL:
        return

    course = cast(Course, course_input)

    helpers.caution_banner()
    print(model_formatters.format_course_multiline(course))
    print("\nDeleting a course removes all of its categories and assignments.")

    if not helpers.confirm_action(f"Are you sure you want to delete {course.name}?"):
        helpers.returning_without_changes()
        return

    index = next(i for i, c in enumerate(gradebook.courses) if c is course)

    helpers.display_response(gradebook.delete_course(index))


def save_gradebook(gradebook: Gradebook) -> None:
    helpers.display_response(gradebook.save())
