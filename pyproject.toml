[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "progalign"
version = "0.1.0"
description = "Progressive multiple sequence alignment of DNA with guide trees, k-mer distances and iterative refinement"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "sequence alignment",
    "multiple sequence alignment",
    "progressive alignment",
    "guide tree",
    "k-mer",
    "dna",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
progalign = "progalign.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["progalign"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
