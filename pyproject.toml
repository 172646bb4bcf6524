[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scratchpad"
version = "0.1.0"
description = "A borderless pad for freehand drawing and quick typed notes"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["drawing", "sketch", "notes", "pygame", "whiteboard", "anti-aliasing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
scratchpad = "scratchpad.app:main"

[tool.hatch.build.targets.wheel]
packages = ["scratchpad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
