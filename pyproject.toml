[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "naturegp"
version = "0.0.1"
description = "Two- and three-component coordinate vectors with tolerance-based comparison"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "vector", "coordinates", "linear algebra"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["naturegp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
