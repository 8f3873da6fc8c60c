[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphalgo"
version = "1.0.0"
description = "Weighted graph algorithms on adjacency matrices: shortest paths, minimum spanning trees and an ant-colony TSP solver"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "adjacency-matrix",
    "dijkstra",
    "floyd-warshall",
    "prim",
    "minimum-spanning-tree",
    "traveling-salesman",
    "ant-colony-optimization",
    "graphviz",
]
classifiers = [
    "Development Status :: 4 - Beta",
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

[tool.hatch.build.targets.wheel]
packages = ["graphalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
