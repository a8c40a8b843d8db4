[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eliteai"
version = "0.1.0"
description = "Game AI toolkit: 2D geometry, navigation meshes, graphs, path finding, behaviour trees and state machines."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game-ai",
    "pathfinding",
    "a-star",
    "navmesh",
    "behavior-tree",
    "state-machine",
    "graph",
    "triangulation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["eliteai"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
