[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lidcavity"
version = "0.1.0"
description = "A 2D lid-driven cavity flow solver with VTK rectilinear-grid output"
requires-python = ">=3.10"
keywords = ["cfd", "navier-stokes", "lid-driven cavity", "vtk", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lid-cavity = "lidcavity.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lidcavity"]

[tool.pytest.ini_options]
addopts = "-ra"
