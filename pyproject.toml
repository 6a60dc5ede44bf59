[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procmine"
version = "0.1.0"
description = "Process mining building blocks: activity projections, directly-follows graphs, Alpha+++ log repair and place candidates, activity splits"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "process mining",
    "event log",
    "directly-follows graph",
    "alpha+++",
    "place candidates",
    "log repair",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["procmine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
