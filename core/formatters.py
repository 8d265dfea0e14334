# core/formatters.py

# all pure text utilities & number display helpers
# must never import from models!

import math

from core.config import FAIR_STANDING_MIN, GOOD_STANDING_MIN

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_list_with_and(items: list[str]) -> str:
    if not items:
        return ""

    if len(items) == 1:
        return items[0]

    if len(items) == 2:
        return " and ".join(items)

    return ", ".join(items[:-1]) + ", and " + items[-1]


# === number formatters ===


def format_number(value: float) -> str:
    """
    Renders whole numbers without a trailing '.0' and everything else as-is.
    """
    if math.isfinite(value) and value == int(value):
        return str(int(value))

    return str(value)


def format_percent(value: float | None) -> str:
    """
    Renders an average or grade as a percentage. Undefined values (None or NaN) render as "0%".
    """
    if value is None or math.isnan(value):
        return "0%"

    return f"{value:.2f}%"


def format_points(actual_points: float, possible_points: float) -> str:
    return f"{format_number(actual_points)} / {possible_points:.2f}"


def format_weight(weight: float | None) -> str:
    return f"{format_number(weight)}%" if weight is not None else "[UNWEIGHTED]"


def format_standing(value: float | None) -> str:
    """
    Labels an average as GOOD, FAIR, or POOR. Undefined values count as zero.
    """
    if value is None or math.isnan(value):
        value = 0.0

    if value >= GOOD_STANDING_MIN:
        return "GOOD"

    if value >= FAIR_STANDING_MIN:
        return "FAIR"

    return "POOR"
