# models/types.py

"""
Holds TypeVar definition for simplifying type checks.
"""

from typing import TypeVar

from .assignment import Assignment
from .category import Category
from .course import Course

RecordType = TypeVar("RecordType", Assignment, Category, Course)
