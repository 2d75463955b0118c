[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heatgrid"
version = "0.1.0"
description = "Dense and block-decomposed Cartesian grids with boundary conditions for heat equation problems"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "heat equation",
    "finite difference",
    "domain decomposition",
    "cartesian topology",
    "multi-dimensional array",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["heatgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
