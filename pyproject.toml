[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphalgos"
version = "0.1.0"
description = "Minimum spanning tree and shortest path algorithms on matrix and list graph representations"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "mst", "prim", "kruskal", "dijkstra", "bellman-ford", "shortest-path"]
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
graphalgos = "graphalgos.app:main"

[tool.hatch.build.targets.wheel]
packages = ["graphalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
