[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "biquadris"
version = "0.1.0"
description = "A two-player competitive falling-block puzzle game played in the terminal"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "falling-blocks", "two-player", "terminal"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
biquadris = "biquadris.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["biquadris"]

[tool.hatch.build.targets.sdist]
include = ["biquadris", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
