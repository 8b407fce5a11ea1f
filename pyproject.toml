[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cassel"
version = "0.1.0"
description = "Search for cyclotomic integers of small house, written as sums of roots of unity"
requires-python = ">=3.10"
dependencies = []
keywords = ["cyclotomic", "roots of unity", "house", "number theory", "Cassels"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cassel = "cassel.search:main"

[tool.hatch.build.targets.wheel]
packages = ["cassel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
