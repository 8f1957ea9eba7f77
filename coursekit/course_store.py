"""Transactional creation and listing of courses with their categories."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, TypeVar

from coursekit.queries import (
    CreateCategoryParams,
    CreateCourseParams,
    ListCoursesRow,
    Queries,
)
from coursekit.uow import TransactionError

__all__ = ["CourseParams", "CategoryParams", "CourseStore", "format_course", "main"]

T = TypeVar("T")


@dataclass(frozen=True)
class CourseParams:
    id: str
    name: str
    description: Optional[str]
    price: float


@dataclass(frozen=True)
class CategoryParams:
    id: str
    name: str
    description: Optional[str]


class CourseStore:
    """Course queries plus helpers that run several of them atomically."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection
        self.queries = Queries(connection)

    def call_tx(self, fn: Callable[[Queries], T]) -> T:
        """Run ``fn`` inside a transaction; commit on success, else roll back."""
        self.connection.execute("BEGIN")
        try:
            result = fn(Queries(self.connection))
        except Exception as err:
            try:
                self.connection.rollback()
            except sqlite3.Error as rollback_err:
                raise TransactionError(
                    f"tx err: {err}, rb err: {rollback_err}"
                ) from err
            raise
        self.connection.commit()
        return result

    def create_course_and_category(
        self, course: CourseParams, category: CategoryParams
    ) -> None:
        """Create ``category`` and ``course`` in it, both or neither."""

        def create(q: Queries) -> None:
            q.create_category(
                CreateCategoryParams(category.id, category.name, category.description)
            )
            q.create_course(
                CreateCourseParams(
                    course.id,
                    course.name,
                    course.description,
                    course.price,
                    category.id,
                )
            )

        self.call_tx(create)


def _format_number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def format_course(row: ListCoursesRow) -> str:
    """Render one listed course as a single line."""
    return " ".join(
        [
            "Course:",
            row.name,
            "ID:",
            row.id,
            "Price:",
            _format_number(row.price),
            "Description:",
            row.description or "",
            "Category:",
            row.category_name or "",
        ]
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """List every course in the database given on the command line."""
    parser = argparse.ArgumentParser(description="List courses with their category.")
    parser.add_argument("database", nargs="?", default="courses.db")
    args = parser.parse_args(argv)
    connection = sqlite3.connect(args.database)
    try:
        rows = CourseStore(connection).queries.list_courses()
    except sqlite3.Error as err:
        print(err, file=sys.stderr)
        return 1
    finally:
        connection.close()
    for row in rows:
        print(format_course(row))
    return 0