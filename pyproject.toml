[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "palletload"
version = "0.1.0"
description = "Choose the most profitable set of pallets that fits in a truck, with brute force, backtracking, dynamic programming, greedy and genetic solvers"
requires-python = ">=3.10"
dependencies = []
keywords = ["knapsack", "optimisation", "dynamic programming", "genetic algorithm", "backtracking", "greedy"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
palletload = "palletload.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["palletload"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
