[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hangman"
version = "0.1.0"
description = "A terminal game of Hangman played against a word list"
requires-python = ">=3.10"
dependencies = []
keywords = ["hangman", "game", "word", "puzzle", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
test = ["pytest"]

[project.scripts]
hangman = "hangman.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hangman"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
