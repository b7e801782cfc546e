[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "redblack"
version = "0.1.0"
description = "A red-black tree of keys with insert, find, erase, min/max and in-order traversal"
requires-python = ">=3.10"
dependencies = []
keywords = ["red-black tree", "balanced tree", "binary search tree", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["redblack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
