[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tadkit"
version = "1.0.0"
description = "Classic data structures and string, token, number and binary-file helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "linked list",
    "stack",
    "queue",
    "map",
    "tokens",
    "bits",
    "binary records",
]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tadkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
