# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Gradebook application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input
- Handling single and multiple selections and confirmation flows
- Displaying standard system messages, warnings, and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from core.response import Response
from core.utils import coerce_number
from models.gradebook import Gradebook
from models.types import RecordType


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    DEFAULT = "DEFAULT"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("\nSelect an option: ")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            # casts choice to int and adjusts for zero-index, retrieves action from tuple
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return options[index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


# === prompt user input methods ===


# Prompt Helpers
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
#     - `prompt_user_input_or_default()` returns `MenuSignal.DEFAULT`.
#     - `prompt_user_input_or_none()` returns `None`.
# - `confirm_action()` loops until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def confirm_make_change() -> bool:
    return confirm_action("Do you want to make this change?")


def confirm_unsaved_changes() -> bool:
    return confirm_action(
        "The last change could not be saved. Do you want to try saving again?"
    )


def prompt_if_dirty(gradebook: Gradebook) -> None:
    if gradebook.has_unsaved_changes and confirm_unsaved_changes():
        display_response(gradebook.save())


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_default(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.DEFAULT if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


def prompt_number_or_cancel(prompt: str) -> float | MenuSignal:
    """
    Loops until the user enters a number, or returns `MenuSignal.CANCEL` on blank input.
    """
    while True:
        response = prompt_user_input_or_cancel(prompt)

        if response is MenuSignal.CANCEL:
            return response

        try:
            return coerce_number(response, "Input")

        except TypeError as e:
            print(f"\n[ERROR] {e} Please try again.")


def prompt_weight_and_drops(
    current_weight: float | None, current_drops: int
) -> tuple[str | float | None, str | int]:
    """
    Prompts for a category weight and drop count, keeping the current values on blank input.

    Notes:
        - Values are returned as entered; coercion and validation happen in the Gradebook.
    """
    weight_input = prompt_user_input_or_default(
        f"Enter the category weight in percent (blank keeps {formatters.format_weight(current_weight)}, 'none' for unweighted):"
    )

    if weight_input is MenuSignal.DEFAULT:
        weight = current_weight
    elif weight_input.lower() == "none":
        weight = None
    else:
        weight = weight_input

    drops_input = prompt_user_input_or_default(
        f"Enter how many of the lowest grades to drop (blank keeps {current_drops}):"
    )

    num_drops = current_drops if drops_input is MenuSignal.DEFAULT else drops_input

    return weight, num_drops


# === selection methods ===


def prompt_selection_from_list(
    list_data: list[RecordType],
    list_description: str,
    formatter: Callable[[RecordType], str] = lambda x: str(x),
) -> RecordType | None:
    """
    Prompts the user to select an item from a list of records.

    Args:
        list_data (list[RecordType]): The records to choose from, already in display order.
        list_description (str): A short description used in prompts and headings (e.g. "courses").
        formatter (Callable[[RecordType], str], optional): Function to convert each record to a display string.

    Returns:
        RecordType: The selected record if a valid index is chosen.
        None: If the list is empty or the user cancels with "0".
    """
    if not list_data:
        print(f"\nThere are no {list_description.lower()}.")
        return

    while True:
        print(f"\n{formatters.format_banner_text(list_description)}")

        display_results(list_data, True, formatter)

        choice = prompt_user_input("Select an option (0 to cancel):")

        if choice == "0":
            return

        try:
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return list_data[index]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


def prompt_multiple_selection_from_list(
    list_data: list[RecordType],
    list_description: str,
    formatter: Callable[[RecordType], str] = lambda x: str(x),
) -> list[RecordType]:
    """
    Prompts the user to select any number of records by entering comma-separated indices.

    Returns:
        The selected records in display order. An empty list if the list is empty or the user enters "0" or nothing.

    Notes:
        - An empty result is passed on to the Gradebook, which reports it as an empty selection.
    """
    if not list_data:
        print(f"\nThere are no {list_description.lower()}.")
        return []

    while True:
        print(f"\n{formatters.format_banner_text(list_description)}")

        display_results(list_data, True, formatter)

        choice = prompt_user_input(
            "Select one or more options separated by commas (0 or blank to select none):"
        )

        if choice in ("", "0"):
            return []

        try:
            indices = sorted({int(part) - 1 for part in choice.split(",") if part.strip()})
            if any(i < 0 or i >= len(list_data) for i in indices):
                raise IndexError(indices)
            return [list_data[i] for i in indices]

        except (ValueError, IndexError):
            print("\nInvalid selection. Please try again.")


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


def caution_banner() -> None:
    caution_banner = formatters.format_banner_text("CAUTION!")
    print(f"\n{caution_banner}")


def display_response(response: Response) -> None:
    """
    Prints the detail of a successful `Response` and any warning it carries, or the failure otherwise.
    """
    if not response.success:
        display_response_failure(response)
        return

    if response.detail:
        print(f"\n{response.detail}")

    if response.warning:
        print(f"\n[WARNING] {response.warning}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")
