[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazegen"
version = "0.1.0"
description = "Random maze generator using iterative depth-first backtracking, drawn as text in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "labyrinth", "generator", "backtracking", "depth-first", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mazegen = "mazegen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mazegen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
