[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "physkit"
version = "0.1.0"
description = "Small computational-physics tools: extended XYZ I/O, trapezoidal integration, and velocity Verlet simulations of a CO2 molecule and a Fermi-Pasta-Ulam chain."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "physics",
    "simulation",
    "velocity-verlet",
    "fermi-pasta-ulam",
    "extxyz",
    "normal-modes",
    "numerical-methods",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
physkit-integrate = "physkit.integration:main"
physkit-co2 = "physkit.co2:main"
physkit-fpu = "physkit.fpu:main"

[tool.hatch.build.targets.wheel]
packages = ["physkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
