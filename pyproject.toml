[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "taskdesk"
version = "0.1.0"
description = "A small multi-user task manager for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "task manager", "cli", "scheduling"]
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
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskdesk = "taskdesk.cli:main"

[tool.setuptools.packages.find]
include = ["taskdesk*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
