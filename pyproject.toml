[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "watchface"
version = "0.1.0"
description = "Logic for a smartwatch face: timezone lookup, weather and location, menus, notifications and clock helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["smartwatch", "watchface", "timezone", "weather", "notifications"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["watchface"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
