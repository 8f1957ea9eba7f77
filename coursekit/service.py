"""Category service: unary and streaming category operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from coursekit.database import Category, CategoryRepository

__all__ = ["CategoryMessage", "CreateCategoryRequest", "CategoryService"]


@dataclass(frozen=True)
class CategoryMessage:
    """A category as sent to service clients."""

    id: str
    name: str
    description: str


@dataclass(frozen=True)
class CreateCategoryRequest:
    """A request to create a category."""

    name: str
    description: str


def _message(category: Category) -> CategoryMessage:
    return CategoryMessage(category.id, category.name, category.description)


class CategoryService:
    """Creates and looks up categories through a category repository."""

    def __init__(self, category_db: CategoryRepository) -> None:
        self.category_db = category_db

    def create_category(self, request: CreateCategoryRequest) -> CategoryMessage:
        """Create one category and return it."""
        return _message(self.category_db.create(request.name, request.description))

    def list_categories(self) -> list[CategoryMessage]:
        """Return every category."""
        return [_message(c) for c in self.category_db.find_all()]

    def get_category(self, category_id: str) -> CategoryMessage:
        """Return the category ``category_id``; NotFoundError if absent."""
        return _message(self.category_db.find_by_id(category_id))

    def create_category_stream(
        self, requests: Iterable[CreateCategoryRequest]
    ) -> list[CategoryMessage]:
        """Create a category per request and return them all once done.

        Stops at the first failure; categories created before it remain.
        """
        return [self.create_category(request) for request in requests]

    def create_category_stream_bidirectional(
        self, requests: Iterable[CreateCategoryRequest]
    ) -> Iterator[CategoryMessage]:
        """Create a category per request, yielding each as it is stored."""
        for request in requests:
            yield self.create_category(request)