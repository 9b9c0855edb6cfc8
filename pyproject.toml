[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ratiofloat"
version = "0.1.0"
description = "Exact rational numbers with arbitrary precision and series-based roots and logarithms"
requires-python = ">=3.10"
dependencies = []
keywords = ["rational", "arbitrary precision", "fraction", "logarithm", "square root"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ratiofloat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
