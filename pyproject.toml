[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alpakit"
version = "0.1.0"
description = "Host-side helpers for parallel kernel frameworks: tag dictionaries, n-dimensional loops, a callback worker thread, scope logging and stream benchmark reporting."
requires-python = ">=3.10"
keywords = ["parallel", "benchmark", "stream", "bandwidth", "nd-loop", "worker-thread"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Benchmark",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["alpakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
