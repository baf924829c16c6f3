[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixed8"
version = "0.1.0"
description = "Signed 32-bit fixed-point numbers with eight fractional bits"
requires-python = ">=3.10"
dependencies = []
keywords = ["fixed-point", "arithmetic", "numbers"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fixed8-demo = "fixed8.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["fixed8"]

[tool.pytest.ini_options]
addopts = "-ra"
