[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catalyst"
version = "0.1.0"
description = "Game engine building blocks: XML configuration, window state, frame timing, immediate-mode debug gizmos and small utilities."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game engine", "gizmos", "debug drawing", "configuration", "frame timing"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["catalyst"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
