[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lambdacalc"
version = "3.1.0"
description = "A small implementation of the pure untyped lambda calculus with De Bruijn indices"
requires-python = ">=3.10"
dependencies = []
keywords = ["lambda", "calculus", "functional", "mathematics", "de-bruijn", "beta-reduction"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lambdacalc"]

[tool.pytest.ini_options]
addopts = "-ra"
