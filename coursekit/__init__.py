"""Course and category storage on SQLite, event dispatching, unit of work and tax helpers."""

__version__ = "0.1.0"

__all__ = [
    "tax",
    "events",
    "database",
    "queries",
    "uow",
    "course_store",
    "resolvers",
    "service",
]