[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastmethods"
version = "0.1.0"
description = "Building blocks for Fast Marching style Eikonal solvers on n-dimensional grids: cells, heaps, a solver base class, gradient descent, grid writers and benchmarking."
requires-python = ">=3.10"
dependencies = []
keywords = ["fast marching", "eikonal", "path planning", "grid", "heap", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["fastmethods"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
