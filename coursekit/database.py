"""SQLite-backed storage for course categories and courses."""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import dataclass

__all__ = [
    "NotFoundError",
    "Category",
    "Course",
    "CategoryRepository",
    "CourseRepository",
    "create_schema",
]


class NotFoundError(LookupError):
    """Raised when a lookup matches no row."""


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    description: str


@dataclass(frozen=True)
class Course:
    id: str
    name: str
    description: str
    category_id: str


_SCHEMA = """
CREATE TABLE IF NOT EXISTS categories (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT
);
CREATE TABLE IF NOT EXISTS courses (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT,
    category_id TEXT NOT NULL REFERENCES categories (id)
);
"""


def create_schema(connection: sqlite3.Connection) -> None:
    """Create the categories and courses tables if they do not exist."""
    connection.executescript(_SCHEMA)


class CategoryRepository:
    """Reads and writes categories through a SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def create(self, name: str, description: str) -> Category:
        """Insert a category with a fresh id and return it."""
        category = Category(str(uuid.uuid4()), name, description)
        with self._connection:
            self._connection.execute(
                "INSERT INTO categories (id, name, description) VALUES (?, ?, ?)",
                (category.id, category.name, category.description),
            )
        return category

    def find_all(self) -> list[Category]:
        """Return every category."""
        rows = self._connection.execute(
            "SELECT id, name, description FROM categories"
        )
        return [Category(*row) for row in rows]

    def find_by_course_id(self, course_id: str) -> Category:
        """Return the category of the course ``course_id``."""
        row = self._connection.execute(
            "SELECT c.id, c.name, c.description FROM categories c "
            "INNER JOIN courses co ON c.id = co.category_id WHERE co.id = ?",
            (course_id,),
        ).fetchone()
        if row is None:
            raise NotFoundError(f"no category for course {course_id!r}")
        return Category(*row)

    def find_by_id(self, category_id: str) -> Category:
        """Return the category with id ``category_id``."""
        row = self._connection.execute(
            "SELECT id, name, description FROM categories WHERE id = ?",
            (category_id,),
        ).fetchone()
        if row is None:
            raise NotFoundError(f"no category with id {category_id!r}")
        return Category(*row)


class CourseRepository:
    """Reads and writes courses through a SQLite connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def create(self, name: str, description: str, category_id: str) -> Course:
        """Insert a course with a fresh id and return it."""
        course = Course(str(uuid.uuid4()), name, description, category_id)
        with self._connection:
            self._connection.execute(
                "INSERT INTO courses (id, name, description, category_id) "
                "VALUES (?, ?, ?, ?)",
                (course.id, course.name, course.description, course.category_id),
            )
        return course

    def find_all(self) -> list[Course]:
        """Return every course."""
        rows = self._connection.execute(
            "SELECT id, name, description, category_id FROM courses"
        )
        return [Course(*row) for row in rows]

    def find_by_category_id(self, category_id: str) -> list[Course]:
        """Return the courses that belong to ``category_id``."""
        rows = self._connection.execute(
            "SELECT id, name, description, category_id FROM courses "
            "WHERE category_id = ?",
            (category_id,),
        )
        return [Course(*row) for row in rows]