[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kattisolve"
version = "0.1.0"
description = "Solutions to short programming-contest puzzles, usable as functions or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["kattis", "competitive-programming", "puzzles", "contest", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kattisolve = "kattisolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kattisolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
