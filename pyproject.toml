[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ipsolver"
version = "0.1.0"
description = "Step-by-step affine-scaling interior-point solver for linear programs"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["linear programming", "interior point", "affine scaling", "optimization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ipsolver = "ipsolver.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ipsolver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
