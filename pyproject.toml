[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strutturedati"
version = "0.1.0"
description = "Stacks, queues and adjacency-matrix graphs, with the exercises and small algorithms built on them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "stack",
    "queue",
    "circular queue",
    "graph",
    "adjacency matrix",
    "postfix",
    "towers of hanoi",
    "algorithms",
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
strutturedati-expr = "strutturedati.expressions:main"
strutturedati-hanoi = "strutturedati.hanoi:main"

[tool.hatch.build.targets.wheel]
packages = ["strutturedati"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
