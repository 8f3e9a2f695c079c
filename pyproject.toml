[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodrills"
version = "0.1.0"
description = "Small classic programming drills: a star pattern, matrix transpose, bubble and merge sort, and binary tree queries."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "exercises", "sorting", "binary-tree", "matrix", "patterns"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algodrills-pyramid = "algodrills.patterns:main"
algodrills-transpose = "algodrills.matrix:main"
algodrills-sort = "algodrills.sorting:main"

[tool.hatch.build.targets.wheel]
packages = ["algodrills"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
