[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mindrun"
version = "1.0.0"
description = "Run with Mind: a terminal maze chase game with two levels, enemies and powerups"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "maze", "terminal", "arcade"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mindrun = "mindrun.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mindrun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
