[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heartwave"
version = "0.1.0"
description = "Simulated heart-rate-variability coherence trainer with sessions, indicators and session logs"
requires-python = ">=3.10"
dependencies = []
keywords = ["hrv", "heart rate variability", "coherence", "biofeedback", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
heartwave = "heartwave.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["heartwave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
