[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algomap"
version = "0.1.0"
description = "Classic algorithms (heaps, shortest paths, string matching, dynamic programming) and MACD result and date-parsing helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "dynamic-programming",
    "dijkstra",
    "kmp",
    "rabin-karp",
    "binary-heap",
    "macd",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
algomap-heap = "algomap.heap:main"
algomap-dijkstra = "algomap.graph:main"
algomap-strmatch = "algomap.string_match:main"

[tool.hatch.build.targets.wheel]
packages = ["algomap"]

[tool.hatch.build.targets.sdist]
include = ["algomap", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
