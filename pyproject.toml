[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gladtpc"
version = "0.1.0"
description = "Data model, pad plane map, electron drift projection and event-generation helpers for a time projection chamber inside a dipole magnet"
requires-python = ">=3.10"
dependencies = []
keywords = ["tpc", "time projection chamber", "drift", "simulation", "langevin", "nuclear physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
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

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gladtpc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
