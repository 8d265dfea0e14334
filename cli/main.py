# cli/main.py

"""
Start Menu for the Gradebook CLI.

Configures logging and opens a Gradebook from its store file. The opened `Gradebook` is owned here and passed
down to every menu; there is no module-level gradebook.
"""

import logging
from typing import cast

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import course_menu
from cli.path_utils import resolve_store_path
from core.config import get_log_level
from core.storage import JsonFileStore
from models.gradebook import Gradebook

logger = logging.getLogger(__name__)


def run_cli() -> None:
    """
    Top-level loop with dispatch for the Start menu.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    configure_logging()

    title = formatters.format_banner_text("GRADEBOOK")
    options = [
        ("Open the default Gradebook", open_default_gradebook),
        ("Open a Gradebook from a file path", open_gradebook_from_path),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program()

        elif callable(menu_response):
            gradebook = menu_response()

            if gradebook is not None:
                course_menu.run(gradebook)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def configure_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def open_default_gradebook() -> Gradebook | None:
    return open_gradebook(None)


def open_gradebook_from_path() -> Gradebook | None:
    """
    Prompts the user for a store file path and opens the `Gradebook` saved there.

    Notes:
        - The path input is cancellable.
        - A directory path opens `gradebook.json` inside it.
    """
    path_input = helpers.prompt_user_input_or_cancel(
        "Enter path to the Gradebook file (leave blank to cancel):"
    )

    if path_input is MenuSignal.CANCEL:
        return None

    return open_gradebook(cast(str, path_input))


def open_gradebook(path_input: str | None) -> Gradebook | None:
    """
    Loads a `Gradebook` from the resolved store path.

    Returns:
        Gradebook: The loaded `Gradebook`, which may be empty if the store was missing or unreadable.
        None: If the store directory cannot be created.

    Notes:
        - Loading never fails on bad data. Warnings are shown and the session continues in memory.
    """
    try:
        store_path = resolve_store_path(path_input)

    except OSError as e:
        print(f"\n[ERROR] Could not prepare the store location: {e}")
        return None

    print(f"\nOpening Gradebook at {store_path} ...")
    logger.info("Opening store at %s", store_path)

    gradebook_response = Gradebook.load(JsonFileStore(store_path))
    helpers.display_response(gradebook_response)

    return gradebook_response.data["gradebook"]


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()
