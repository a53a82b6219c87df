[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numlab"
version = "0.1.0"
description = "Root finding (bisection, false position, Newton-Raphson, secant) and Lagrange interpolation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical methods",
    "root finding",
    "bisection",
    "false position",
    "newton-raphson",
    "secant",
    "lagrange",
    "interpolation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numlab-roots = "numlab.rootfind:main"
numlab-lagrange = "numlab.interpolation:main"

[tool.hatch.build.targets.wheel]
packages = ["numlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
