[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "casgame"
version = "0.1.0"
description = "A small tile-based dungeon crawler with procedurally generated rooms"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "roguelike", "dungeon", "procedural-generation", "tiles"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
casgame = "casgame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["casgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
