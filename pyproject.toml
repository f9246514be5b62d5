[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stlkit"
version = "0.1.0"
description = "Ordered containers with STL-style cursors: red-black tree, set, multiset, skip list, slice views, vector and stack."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "red-black-tree",
    "skiplist",
    "set",
    "multiset",
    "vector",
    "stack",
    "iterator",
    "comparator",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stlkit"]

[tool.pytest.ini_options]
addopts = "-ra"
