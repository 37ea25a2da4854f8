[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "rosterkit"
version = "0.1.0"
description = "Student roster records held in lists and binary search trees, with list edits, sorts and tree statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "binary search tree", "sorting", "students", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rosterkit = "rosterkit.cli:main"

[tool.setuptools.packages.find]
include = ["rosterkit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
