[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crucibletools"
version = "0.1.0"
description = "Data models, enumerations and statistics aggregation for Destiny 2 Crucible activity data"
requires-python = ">=3.10"
dependencies = []
keywords = ["destiny2", "crucible", "pvp", "statistics", "games"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["crucibletools"]

[tool.pytest.ini_options]
addopts = "-ra"
