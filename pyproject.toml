[build-system]
requires = ["setuptools>=68"]
build-backend = "setuptools.build_meta"

[project]
name = "coursekit"
version = "0.1.0"
description = "Course and category storage on SQLite, event dispatching, unit of work and tax helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "events",
    "dispatcher",
    "unit-of-work",
    "sqlite",
    "repository",
    "courses",
    "tax",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursekit-courses = "coursekit.course_store:main"

[tool.setuptools.packages.find]
include = ["coursekit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
