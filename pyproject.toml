[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "freefall_lab"
version = "0.1.0"
description = "Free-fall kinematics: position tables, a pausable real-time clock and a live position-vs-time plot"
requires-python = ">=3.10"
keywords = ["physics", "kinematics", "free fall", "simulation", "plot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Education",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
freefall-lab = "freefall_lab.app:main"

[tool.hatch.build.targets.wheel]
packages = ["freefall_lab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
