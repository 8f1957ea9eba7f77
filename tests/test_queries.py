import sqlite3

import pytest

from coursekit.database import NotFoundError
from coursekit.queries import (
    Category,
    CreateCategoryParams,
    CreateCourseParams,
    ListCoursesRow,
    Queries,
    UpdateCategoryParams,
    create_schema,
)


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    create_schema(connection)
    yield connection
    connection.close()


def test_create_and_get_category(conn):
    q = Queries(conn)
    q.create_category(CreateCategoryParams("cat-1", "Databases", "Databases course"))
    assert q.get_category("cat-1") == Category("cat-1", "Databases", "Databases course")


def test_null_description_round_trip(conn):
    q = Queries(conn)
    q.create_category(CreateCategoryParams("cat-1", "Databases", None))
    assert q.get_category("cat-1").description is None


def test_get_missing_category_raises(conn):
    with pytest.raises(NotFoundError):
        Queries(conn).get_category("missing")


def test_list_categories_empty(conn):
    assert Queries(conn).list_categories() == []


def test_list_categories(conn):
    q = Queries(conn)
    q.create_category(CreateCategoryParams("a", "A", "first"))
    q.create_category(CreateCategoryParams("b", "B", None))
    assert sorted(q.list_categories(), key=lambda c: c.id) == [
        Category("a", "A", "first"),
        Category("b", "B", None),
    ]


def test_update_category(conn):
    q = Queries(conn)
    q.create_category(CreateCategoryParams("cat-1", "Databases", "Databases course"))
    q.update_category(
        UpdateCategoryParams("Databases", "Databases course updated", "cat-1")
    )
    assert q.get_category("cat-1").description == "Databases course updated"


def test_delete_category(conn):
    q = Queries(conn)
    q.create_category(CreateCategoryParams("cat-1", "Databases", None))
    q.delete_category("cat-1")
    with pytest.raises(NotFoundError):
        q.get_category("cat-1")


def test_list_courses_joins_category_name(conn):
    q = Queries(conn)
    q.create_category(CreateCategoryParams("cat-1", "Programming", None))
    q.create_course(CreateCourseParams("c-1", "SQL", "Query basics", 10.99, "cat-1"))
    assert q.list_courses() == [
        ListCoursesRow("c-1", "cat-1", "SQL", "Query basics", None, 10.99, "Programming")
    ]


def test_list_courses_without_category_has_no_name(conn):
    q = Queries(conn)
    q.create_course(CreateCourseParams("c-1", "SQL", None, 1.5, "nowhere"))
    [row] = q.list_courses()
    assert row.category_name is None
    assert row.category_id == "nowhere"


def test_duplicate_id_raises(conn):
    q = Queries(conn)
    q.create_category(CreateCategoryParams("cat-1", "A", None))
    with pytest.raises(sqlite3.IntegrityError):
        q.create_category(CreateCategoryParams("cat-1", "B", None))


def test_writes_outside_transaction_are_committed(tmp_path):
    path = tmp_path / "courses.db"
    writer = sqlite3.connect(path)
    create_schema(writer)
    Queries(writer).create_category(CreateCategoryParams("cat-1", "A", None))
    reader = sqlite3.connect(path)
    try:
        assert [c.id for c in Queries(reader).list_categories()] == ["cat-1"]
    finally:
        reader.close()
        writer.close()


def test_with_tx_leaves_commit_to_transaction(conn):
    conn.execute("BEGIN")
    tx_queries = Queries(conn).with_tx(conn)
    tx_queries.create_category(CreateCategoryParams("cat-1", "A", None))
    assert conn.in_transaction
    conn.rollback()
    assert Queries(conn).list_categories() == []