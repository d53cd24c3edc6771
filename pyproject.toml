[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parkrush"
version = "0.1.0"
description = "Game logic for a top-down parking game: collision results, collision detection, effects, game state and level loading."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "parking", "collision", "level", "simulation"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["parkrush"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
