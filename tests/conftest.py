# tests/conftest.py

import json

import pytest

from core.storage import MemoryStore
from models.assignment import Assignment
from models.category import Category
from models.course import Course
from models.gradebook import Gradebook

SAMPLE_IMPORT = {
    "Quizzes": {
        "weight": 50,
        "numDrops": 0,
        "grades": [
            {"name": "Quiz 1", "actualPoints": 8, "possiblePoints": 10},
            {"name": "Quiz 2", "actualPoints": 5, "possiblePoints": 10},
        ],
    },
    "Exams": {
        "weight": 50,
        "grades": [
            {"name": "Midterm", "actualPoints": 60, "possiblePoints": 100},
        ],
    },
    "Participation": {
        "grades": [
            {"name": "Week 1", "actualPoints": "9", "possiblePoints": "10"},
        ],
    },
}


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def sample_gradebook(memory_store):
    return Gradebook(memory_store)


@pytest.fixture
def sample_import_json():
    return json.dumps(SAMPLE_IMPORT)


@pytest.fixture
def imported_gradebook(sample_gradebook, sample_import_json):
    sample_gradebook.import_course("CS 161", 4, sample_import_json)
    return sample_gradebook


@pytest.fixture
def imported_course(imported_gradebook):
    return imported_gradebook.courses[0]


@pytest.fixture
def sample_assignment():
    return Assignment("Homework 1", 8, 10)


@pytest.fixture
def sample_weighted_category():
    return Category(
        "Quizzes",
        weight=50.0,
        grades=[Assignment("Quiz 1", 8, 10), Assignment("Quiz 2", 5, 10)],
    )


@pytest.fixture
def sample_unweighted_category():
    return Category("Extra", grades=[Assignment("Bonus", 9, 10)])


@pytest.fixture
def sample_course():
    return Course(
        "THTR 274A",
        3,
        {
            "A": Category("A", 50, grades=[Assignment("a1", 80, 100)]),
            "B": Category("B", 50, grades=[Assignment("b1", 60, 100)]),
            "C": Category("C", grades=[Assignment("c1", 90, 100)]),
        },
    )
