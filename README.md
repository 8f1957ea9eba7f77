# coursekit

A small toolkit for applications that keep courses and their categories in
SQLite. It uses only the standard library.

## Modules

- `coursekit.tax`: `calculate_tax(amount)` returns 10.0 for amounts of 1000
  or more and 5.0 otherwise. `calculate_tiered_tax(amount)` returns 0.0 for
  amounts of zero or less, 10.0 from 1000 up to (not including) 20000, 20.0
  from 20000 on, and 5.0 for everything else.
- `coursekit.events`: `Event` (a `name`, a `payload` and a `date_time`),
  the abstract `EventHandler` with a `handle(event)` method, and
  `EventDispatcher`. The dispatcher keeps handlers per event name, compared by
  identity:
  - `register(event_name, handler)` raises `HandlerAlreadyRegisteredError`
    when the same handler object is already registered for that name;
  - `has(event_name, handler)`, `remove(event_name, handler)` (does nothing
    if the handler is absent), `clear()` and `handlers_for(event_name)`
    (a tuple in registration order);
  - `dispatch(event)` runs every handler of `event.name` in its own thread,
    waits for all of them, and then re-raises the first exception raised by a
    handler, in registration order.
- `coursekit.database`: `create_schema(connection)`, the frozen dataclasses
  `Category` and `Course`, and the repositories `CategoryRepository`
  (`create`, `find_all`, `find_by_course_id`, `find_by_id`) and
  `CourseRepository` (`create`, `find_all`, `find_by_category_id`). `create`
  assigns a fresh UUID and commits; lookups of a single row raise
  `NotFoundError` when nothing matches.
- `coursekit.queries`: its own `create_schema(connection)` for tables whose
  courses also carry a `thumbnail` and a `price`, and a `Queries` object with
  `create_category`, `create_course`, `update_category`, `delete_category`,
  `get_category` (raises `NotFoundError`), `list_categories`, `list_courses`
  (each row as a `ListCoursesRow` with the category's name, or `None` if it
  has none) and `with_tx(tx)`. Outside an open transaction each write is
  committed at once; inside one it is left to the transaction's owner.
- `coursekit.uow`: `UnitOfWork(connection)` registers repository factories by
  name (`register`, `unregister`). `get_repository(name)` starts a
  transaction if none is open and calls the factory with the connection; an
  unknown name raises `KeyError`. `do(fn)` opens a new transaction, calls
  `fn(unit_of_work)`, commits on success and rolls back when `fn` raises.
  `commit_or_rollback()` and `rollback()` finish the open transaction.
  Misuse, such as `do` while a transaction is open or `rollback` without one,
  raises `TransactionError`.
- `coursekit.course_store`: `CourseStore(connection)` holds a `Queries`
  object as `queries`; `call_tx(fn)` runs `fn(queries)` in a transaction and
  returns its result, and `create_course_and_category(course, category)`
  stores a `CategoryParams` and a `CourseParams` in it, both or neither.
  `format_course(row)` renders a `ListCoursesRow` as one line.
- `coursekit.resolvers`: `Resolver(category_db, course_db)` answers the
  catalogue's fields with `categories()`, `courses()`,
  `category_courses(category)`, `course_category(course)`,
  `create_category(NewCategory(...))` and `create_course(NewCourse(...))`,
  returning `CategoryModel` and `CourseModel` values. Creating without a
  description raises `ValueError`.
- `coursekit.service`: `CategoryService(category_db)` with
  `create_category(CreateCategoryRequest(...))`, `list_categories()`,
  `get_category(category_id)`, `create_category_stream(requests)` (creates
  one category per request and returns them all as a list) and
  `create_category_stream_bidirectional(requests)` (a generator yielding each
  `CategoryMessage` as it is stored).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

Tax rates:

```python
from coursekit.tax import calculate_tax, calculate_tiered_tax

calculate_tax(500.0)           # 5.0
calculate_tax(1000.0)          # 10.0
calculate_tiered_tax(0)        # 0.0
calculate_tiered_tax(20000.0)  # 20.0
```

Events:

```python
from coursekit.events import Event, EventDispatcher, EventHandler


class PrintName(EventHandler):
    def handle(self, event):
        print("handled", event.name)


dispatcher = EventDispatcher()
handler = PrintName()
dispatcher.register("course.created", handler)
dispatcher.dispatch(Event("course.created", payload={"name": "Go"}))
dispatcher.has("course.created", handler)  # True
```

Repositories:

```python
import sqlite3

from coursekit.database import CategoryRepository, CourseRepository, create_schema

connection = sqlite3.connect(":memory:")
create_schema(connection)

categories = CategoryRepository(connection)
courses = CourseRepository(connection)

backend = categories.create("Backend", "Server-side development")
courses.create("Databases", "Relational modelling", backend.id)

for course in courses.find_by_category_id(backend.id):
    print(course.name)
```

Creating a course and its category atomically:

```python
import sqlite3

from coursekit.course_store import CategoryParams, CourseParams, CourseStore, format_course
from coursekit.queries import create_schema

connection = sqlite3.connect(":memory:")
create_schema(connection)

store = CourseStore(connection)
store.create_course_and_category(
    CourseParams("course-1", "Go", "Go is a programming language", 10.99),
    CategoryParams("category-1", "Programming", "Programming category"),
)
for row in store.queries.list_courses():
    print(format_course(row))
```

## Command line

```
coursekit-courses [DATABASE]
```

opens the SQLite file `DATABASE` (default `courses.db`) and prints one line
per course with its name, id, price, description and category name. The file
is expected to hold the tables made by `coursekit.queries.create_schema`; the
command does not create them, and on a database error it prints the error and
exits with status 1.

## What it does not do

The resolvers and the category service are plain Python objects: the package
serves no API over the network and ships no schema or RPC definitions for
them. Events are dispatched in-process only; nothing is sent to or read from
a message broker. Storage is SQLite only.