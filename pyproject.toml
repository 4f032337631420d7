[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mggss"
version = "0.1.0"
description = "Multigrid Gauss-Seidel solver for the two-dimensional Poisson equation"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["multigrid", "gauss-seidel", "poisson", "numerical", "pde", "solver"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
mggss = "mggss.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mggss"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
