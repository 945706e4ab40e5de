[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vegakit"
version = "0.1.0"
description = "Core utilities for a small 2D game engine: events, input state, camera, math helpers, UUIDs, resources and logging"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "2d", "events", "input", "uuid", "camera"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vegakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
