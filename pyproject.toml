[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "aisdlab"
version = "0.1.0"
description = "Shapes drawn on a character screen, and AVL-tree set and sequence operations with a timing benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "tree", "bresenham", "ascii", "shapes", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aisdlab-figures = "aisdlab.figures:main"
aisdlab-bench = "aisdlab.bench:main"

[tool.setuptools.packages.find]
include = ["aisdlab*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
