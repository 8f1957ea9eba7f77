"""Typed queries over the categories and courses tables."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from typing import Any, Optional

from coursekit.database import NotFoundError

__all__ = [
    "Category",
    "Course",
    "CreateCategoryParams",
    "CreateCourseParams",
    "UpdateCategoryParams",
    "ListCoursesRow",
    "Queries",
    "create_schema",
]


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class Course:
    id: str
    category_id: str
    name: str
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    price: float = 0.0


@dataclass(frozen=True)
class CreateCategoryParams:
    id: str
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class CreateCourseParams:
    id: str
    name: str
    description: Optional[str]
    price: float
    category_id: str


@dataclass(frozen=True)
class UpdateCategoryParams:
    name: str
    description: Optional[str]
    id: str


@dataclass(frozen=True)
class ListCoursesRow:
    id: str
    category_id: str
    name: str
    description: Optional[str]
    thumbnail: Optional[str]
    price: float
    category_name: Optional[str]


_SCHEMA = """
CREATE TABLE IF NOT EXISTS categories (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT
);
CREATE TABLE IF NOT EXISTS courses (
    id TEXT PRIMARY KEY,
    category_id TEXT NOT NULL REFERENCES categories (id),
    name TEXT NOT NULL,
    description TEXT,
    thumbnail TEXT,
    price REAL NOT NULL
);
"""

_CREATE_CATEGORY = "INSERT INTO categories (id, name, description) VALUES (?, ?, ?)"
_CREATE_COURSE = (
    "INSERT INTO courses (id, name, description, price, category_id) "
    "VALUES (?, ?, ?, ?, ?)"
)
_DELETE_CATEGORY = "DELETE FROM categories WHERE id = ?"
_GET_CATEGORY = "SELECT id, name, description FROM categories WHERE id = ?"
_LIST_CATEGORIES = "SELECT id, name, description FROM categories"
_LIST_COURSES = (
    "SELECT c.id, c.category_id, c.name, c.description, c.thumbnail, c.price, "
    "ca.name AS category_name FROM courses c "
    "LEFT JOIN categories ca ON ca.id = c.category_id"
)
_UPDATE_CATEGORY = "UPDATE categories SET name = ?, description = ? WHERE id = ?"


def create_schema(connection: sqlite3.Connection) -> None:
    """Create the categories and courses tables if they do not exist."""
    connection.executescript(_SCHEMA)


class Queries:
    """Runs the course queries against a connection.

    Outside an open transaction every write is committed at once; inside
    one it is left to whoever owns the transaction.
    """

    def __init__(self, db: sqlite3.Connection) -> None:
        self._db = db

    def with_tx(self, tx: sqlite3.Connection) -> Queries:
        """Return queries bound to the transaction ``tx``."""
        return Queries(tx)

    def _execute(self, sql: str, params: tuple[Any, ...]) -> None:
        started = self._db.in_transaction
        self._db.execute(sql, params)
        if not started and self._db.in_transaction:
            self._db.commit()

    def create_category(self, params: CreateCategoryParams) -> None:
        self._execute(_CREATE_CATEGORY, (params.id, params.name, params.description))

    def create_course(self, params: CreateCourseParams) -> None:
        self._execute(
            _CREATE_COURSE,
            (
                params.id,
                params.name,
                params.description,
                params.price,
                params.category_id,
            ),
        )

    def delete_category(self, category_id: str) -> None:
        self._execute(_DELETE_CATEGORY, (category_id,))

    def get_category(self, category_id: str) -> Category:
        """Return the category ``category_id`` or raise NotFoundError."""
        row = self._db.execute(_GET_CATEGORY, (category_id,)).fetchone()
        if row is None:
            raise NotFoundError(f"no category with id {category_id!r}")
        return Category(*row)

    def list_categories(self) -> list[Category]:
        return [Category(*row) for row in self._db.execute(_LIST_CATEGORIES)]

    def list_courses(self) -> list[ListCoursesRow]:
        """Return every course with the name of its category, if any."""
        return [ListCoursesRow(*row) for row in self._db.execute(_LIST_COURSES)]

    def update_category(self, params: UpdateCategoryParams) -> None:
        self._execute(_UPDATE_CATEGORY, (params.name, params.description, params.id))