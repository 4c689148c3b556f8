[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "gapathfinder"
version = "0.1.0"
description = "Genetic-algorithm path planning for a mobile robot on a grid arena with obstacles"
requires-python = ">=3.10"
dependencies = []
keywords = ["genetic algorithm", "path planning", "robot navigation", "grid", "evolutionary"]
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
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gapathfinder = "gapathfinder.navigator:main"

[tool.setuptools.packages.find]
include = ["gapathfinder*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
