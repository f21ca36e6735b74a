[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rair"
version = "0.1.0"
description = "Data models, SQL repositories and helpers for a multi-user dungeon game backend"
requires-python = ">=3.10"
keywords = ["mud", "game", "backend", "repository", "database"]
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
    "Topic :: Games/Entertainment :: Multi-User Dungeons (MUD)",
    "Topic :: Database",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rair"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
