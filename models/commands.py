# models/commands.py

"""
Category actions as tagged command variants.

A UI builds one of these from user input and hands it to `Gradebook.execute()` together with the course and
the category it targets. `Gradebook.execute()` dispatches on the command type in a single `match` statement,
so each action maps onto exactly one Gradebook mutator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from models.assignment import Assignment


@dataclass
class AddAssignment:
    assignment: Assignment


@dataclass
class ChangeCategory:
    destination: str
    assignments: list[Assignment] = field(default_factory=list)


@dataclass
class DeleteAssignments:
    assignments: list[Assignment] = field(default_factory=list)


@dataclass
class EditCategory:
    name: str
    weight: float | str | None = None
    num_drops: int | str = 0


@dataclass
class DeleteCategory:
    pass


Command = Union[
    AddAssignment, ChangeCategory, DeleteAssignments, EditCategory, DeleteCategory
]
