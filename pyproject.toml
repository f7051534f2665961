[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nextline"
version = "0.1.0"
description = "Read bytes one line at a time from file descriptors, with separate pending data for each descriptor."
requires-python = ">=3.10"
dependencies = []
keywords = ["readline", "file descriptor", "buffered reading", "lines"]
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
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nextline = "nextline.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nextline"]

[tool.pytest.ini_options]
addopts = "-ra"
