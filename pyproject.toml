[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plantilla"
version = "1.0.0"
description = "A small in-memory staff register for employees, managers, developers and teachers, with an interactive command-line front end."
requires-python = ">=3.10"
dependencies = []
keywords = ["staff", "employees", "register", "roster", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
plantilla = "plantilla.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["plantilla"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
