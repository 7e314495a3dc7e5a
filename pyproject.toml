[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "petshelter"
version = "0.1.0"
description = "Keep track of the animals in a pet shelter and their interested adopters."
requires-python = ">=3.10"
dependencies = []
keywords = ["pet", "shelter", "adoption", "records", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
petshelter = "petshelter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["petshelter"]

[tool.pytest.ini_options]
addopts = "-ra"
