[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokefight"
version = "0.1.0"
description = "Game logic for a side-view creature fighting game: health bars, pokeballs, special attacks, fighters, tile maps and menu states"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "fighting", "rpg", "simulation", "tilemap"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pokefight"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
