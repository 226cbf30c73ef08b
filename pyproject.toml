[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamealgos"
version = "0.1.0"
description = "Small game-programming algorithms: hash table, sorting and searching, collision tests and pathfinding."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "games", "pathfinding", "collision", "sorting", "hash table"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gamealgos-hashtable = "gamealgos.hashtable:main"
gamealgos-sorting = "gamealgos.sorting:main"
gamealgos-collision = "gamealgos.collision:main"
gamealgos-pathfinding = "gamealgos.pathfinding:main"

[tool.hatch.build.targets.wheel]
packages = ["gamealgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
