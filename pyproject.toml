[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "segdeque"
version = "0.1.0"
description = "A segmented double-ended queue built on array and linked-list sequences, with a small command interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "deque",
    "segmented deque",
    "sequence",
    "linked list",
    "dynamic array",
    "data structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
segdeque = "segdeque.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["segdeque"]

[tool.hatch.build.targets.sdist]
include = ["segdeque", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
