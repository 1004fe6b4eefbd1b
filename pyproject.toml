[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scatterkit"
version = "0.1.0"
description = "Scattering-order parameter parsing for opaque particle signals, plus gnuplot script and style helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["scattering", "particle", "laser", "signal", "gnuplot", "plotting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scatterkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
