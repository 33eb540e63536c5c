[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "forca"
version = "0.1.0"
description = "A two-player hangman (forca) game for the terminal, with small screen, keyboard and timer helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["hangman", "forca", "game", "terminal", "ansi", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: POSIX",
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
forca = "forca.hangman:main"
forca-gallows = "forca.gallows:main"

[tool.hatch.build.targets.wheel]
packages = ["forca"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
