[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetris"
version = "0.1.0"
description = "A falling-block puzzle game with a menu, levels and scoring, drawn with pygame."
requires-python = ">=3.10"
keywords = ["tetris", "game", "puzzle", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tetris = "tetris.render:main"

[tool.hatch.build.targets.wheel]
packages = ["tetris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
