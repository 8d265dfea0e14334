# cli/model_formatters.py

# anything that renders domain objects
from textwrap import dedent

import core.formatters as formatters
from models.assignment import Assignment
from models.category import Category
from models.course import Course

# === course formatters ===


def format_course_oneline(course: Course) -> str:
    average = course.weighted_average

    return (
        f"{course.name:<20} | {formatters.format_percent(average):>8} "
        f"[{formatters.format_standing(average)}]"
    )


def format_course_multiline(course: Course) -> str:
    average = course.weighted_average

    return dedent(
        f"""\
        Course:
        ... Name: {course.name}
        ... Credits: {formatters.format_number(course.credits)}
        ... Categories: {len(course.categories)}
        ... Average: {formatters.format_percent(average)} [{formatters.format_standing(average)}]"""
    )


# === category formatters ===


def format_category_oneline(category: Category) -> str:
    weight = formatters.format_weight(category.weight)
    average = formatters.format_percent(category.average)
    drops = f" (drops {category.num_drops})" if category.num_drops else ""

    return f"{category.name:<20} | {weight:>12} | {average:>8}{drops}"


def format_category_multiline(category: Category, course: Course) -> str:
    weight_note = (
        f"This category accounts for {formatters.format_weight(category.weight)} of your course grade."
        if category.is_weighted
        else "This category needs to be updated with the weight as listed in your syllabus."
    )

    return dedent(
        f"""\
        Category in {course.name}:
        ... Name: {category.name}
        ... Weight: {formatters.format_weight(category.weight)}
        ... Lowest grades dropped: {category.num_drops}
        ... Assignments: {len(category.grades)}
        ... Average: {formatters.format_percent(category.average)} [{formatters.format_standing(category.average)}]
        {weight_note}"""
    )


# === assignment formatters ===


def format_assignment_oneline(assignment: Assignment) -> str:
    what_if = (
        f" [WHAT-IF: {formatters.format_number(assignment.hypothetical_points)}]"
        if assignment.has_what_if
        else ""
    )

    return (
        f"{assignment.name:<20} | {assignment.display_grade:>16} | "
        f"{formatters.format_percent(assignment.grade):>8}{what_if}"
    )
