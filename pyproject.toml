[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dynprog"
version = "0.1.0"
description = "Classic dynamic programming problems: knapsack, subset sums, stock trading, strings, palindromes, grids, scheduling and shortest paths."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dynamic programming",
    "algorithms",
    "knapsack",
    "subset sum",
    "edit distance",
    "palindrome",
    "shortest path",
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dynprog"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
