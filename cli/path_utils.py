# cli/path_utils.py

import os

from core.config import DEFAULT_STORE_DIR, DEFAULT_STORE_FILENAME, STORE_ENV_VAR


def get_store_path(user_input: str | None) -> str:
    """
    Resolves the path of the Gradebook store file based on user input, environment, or default location.

    Args:
        user_input (str | None): An optional user-specified path. If None or blank, the environment and default are used.

    Returns:
        A path string, in order of preference:
            - The expanded user input.
            - The expanded value of the `GRADEBOOK_STORE` environment variable.
            - `~/Documents/Gradebooks/gradebook.json`.
        If the chosen path is an existing directory, the default file name is appended to it.
    """
    if user_input is not None and user_input.strip():
        path = os.path.expanduser(user_input.strip())
    elif os.environ.get(STORE_ENV_VAR):
        path = os.path.expanduser(os.environ[STORE_ENV_VAR])
    else:
        path = os.path.join(DEFAULT_STORE_DIR, DEFAULT_STORE_FILENAME)

    if os.path.isdir(path):
        path = os.path.join(path, DEFAULT_STORE_FILENAME)

    return os.path.abspath(path)


def resolve_store_path(user_input: str | None) -> str:
    """
    Produces a store file path and ensures its parent directory exists.

    Notes:
        - Creates the parent directory on disk (including its parents) if it does not exist.
    """
    store_path = get_store_path(user_input)

    os.makedirs(os.path.dirname(store_path), exist_ok=True)

    return store_path
