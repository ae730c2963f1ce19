[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "abcsolve"
version = "0.1.0"
description = "Solutions to AtCoder Beginner Contest problems, usable as functions or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["atcoder", "competitive-programming", "algorithms", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
abcsolve = "abcsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["abcsolve"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
