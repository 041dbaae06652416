[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iwork"
version = "0.1.0"
description = "Small staff and department records tool backed by SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["employees", "departments", "personnel", "sqlite", "records"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
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
iwork = "iwork.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["iwork"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
