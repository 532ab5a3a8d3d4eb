[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockdrop"
version = "0.1.0"
description = "A falling-block puzzle game with a menu, leaderboard and line-clear effects"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "falling blocks", "pygame"]
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
blockdrop = "blockdrop.game:main"

[tool.hatch.build.targets.wheel]
packages = ["blockdrop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
