[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "panelkit"
version = "0.1.0"
description = "User interface element trees with colors, containers and layout computation"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "layout", "widgets", "containers", "color", "hsl"]
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
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["panelkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
