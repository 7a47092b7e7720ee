[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ministructs"
version = "0.1.0"
description = "Small data structures of strings: stack, queue, dynamic array, hash table, binary tree and linked lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "stack", "queue", "dynamic array", "hash table", "linked list", "binary tree"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ministructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
