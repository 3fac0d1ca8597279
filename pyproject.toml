[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foxmaze"
version = "0.1.0"
description = "A tile-based maze game: guide the fox past walls and enemies, gather every collectable, then reach the exit."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "maze", "puzzle", "pygame", "tile-map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
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
test = [
    "pytest",
]

[project.scripts]
foxmaze = "foxmaze.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["foxmaze"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
