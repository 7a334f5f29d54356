[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classgroup"
version = "0.1.0"
description = "Arbitrary-precision integer helpers, number theory, two's-complement encoding, linear congruences and protocol messages."
requires-python = ">=3.10"
dependencies = []
keywords = ["classgroup", "number theory", "bignum", "congruence", "two's complement"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["classgroup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
