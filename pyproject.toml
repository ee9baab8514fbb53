[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqmatrix"
version = "0.1.0"
description = "Square matrices with arithmetic operators, transpose, powers and determinants"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "square matrix", "linear algebra", "determinant"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["sqmatrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
