# core/utils.py

"""
Repository for program-wide utilities.
"""

import math
import re
from typing import Any, TypeVar

V = TypeVar("V")


def rename_key(mapping: dict[str, V], old_key: str, new_key: str) -> dict[str, V]:
    """
    Replaces `old_key` with `new_key` in a dictionary while keeping the entry in the same position.

    Args:
        mapping (dict[str, V]): The dictionary to mutate in place.
        old_key (str): The existing key.
        new_key (str): The replacement key.

    Returns:
        The same dictionary, for chaining.

    Raises:
        KeyError: If `old_key` is not in the dictionary.
        ValueError: If `new_key` already belongs to a different entry.
    """
    if old_key not in mapping:
        raise KeyError(old_key)

    if new_key == old_key:
        return mapping

    if new_key in mapping:
        raise ValueError(f"The key '{new_key}' already exists.")

    entries = list(mapping.items())
    mapping.clear()

    for key, value in entries:
        mapping[new_key if key == old_key else key] = value

    return mapping


def coerce_number(value: Any, field_name: str) -> float:
    """
    Casts form or JSON input to a float.

    Raises:
        TypeError: If the input cannot be cast to float.
    """
    if isinstance(value, bool):
        raise TypeError(f"{field_name} must be a number.")

    try:
        return float(value)

    except (TypeError, ValueError):
        raise TypeError(f"{field_name} must be a number.")


def coerce_optional_number(value: Any, field_name: str) -> float | None:
    if value is None or value == "":
        return None

    return coerce_number(value, field_name)


def coerce_count(value: Any, field_name: str) -> int:
    """
    Casts input to a whole number, treating None and "" as zero.

    Raises:
        TypeError: If the input cannot be cast to a finite whole number.
    """
    if value is None or value == "":
        return 0

    number = coerce_number(value, field_name)

    if not math.isfinite(number):
        raise TypeError(f"{field_name} must be a whole number.")

    return int(number)


def natural_sort_key(text: str) -> list[Any]:
    """
    Splits a string into text and number chunks so that "Quiz 2" sorts before "Quiz 10".
    """
    return [
        (0, int(chunk), "") if chunk.isdigit() else (1, 0, chunk.lower())
        for chunk in re.split(r"(\d+)", text)
        if chunk
    ]
