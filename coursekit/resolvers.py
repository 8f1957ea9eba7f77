"""Resolvers for the course catalogue's query and mutation fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from coursekit.database import (
    Category,
    CategoryRepository,
    Course,
    CourseRepository,
)

__all__ = [
    "CategoryModel",
    "CourseModel",
    "NewCategory",
    "NewCourse",
    "Resolver",
]


@dataclass(frozen=True)
class CategoryModel:
    """A category as exposed to API clients."""

    id: str
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class CourseModel:
    """A course as exposed to API clients."""

    id: str
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class NewCategory:
    """Input for creating a category."""

    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class NewCourse:
    """Input for creating a course within a category."""

    name: str
    category_id: str
    description: Optional[str] = None


def _category_model(category: Category) -> CategoryModel:
    return CategoryModel(category.id, category.name, category.description)


def _course_model(course: Course) -> CourseModel:
    return CourseModel(course.id, course.name, course.description)


def _required_description(description: Optional[str]) -> str:
    if description is None:
        raise ValueError("description is required")
    return description


@dataclass
class Resolver:
    """Answers the catalogue's fields from the category and course stores."""

    category_db: CategoryRepository
    course_db: CourseRepository

    def category_courses(self, category: CategoryModel) -> list[CourseModel]:
        """Return the courses belonging to ``category``."""
        return [
            _course_model(course)
            for course in self.course_db.find_by_category_id(category.id)
        ]

    def course_category(self, course: CourseModel) -> CategoryModel:
        """Return the category that ``course`` belongs to."""
        return _category_model(self.category_db.find_by_course_id(course.id))

    def create_category(self, new_category: NewCategory) -> CategoryModel:
        """Store a new category and return it."""
        category = self.category_db.create(
            new_category.name, _required_description(new_category.description)
        )
        return _category_model(category)

    def create_course(self, new_course: NewCourse) -> CourseModel:
        """Store a new course and return it."""
        course = self.course_db.create(
            new_course.name,
            _required_description(new_course.description),
            new_course.category_id,
        )
        return _course_model(course)

    def categories(self) -> list[CategoryModel]:
        """Return every category."""
        return [_category_model(c) for c in self.category_db.find_all()]

    def courses(self) -> list[CourseModel]:
        """Return every course."""
        return [_course_model(c) for c in self.course_db.find_all()]