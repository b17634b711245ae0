[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nanotekspice"
version = "1.0.0"
description = "A small tristate digital logic circuit simulator with a circuit file parser and an interactive shell"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "circuit", "simulator", "tristate", "digital"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nanotekspice = "nanotekspice.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["nanotekspice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
