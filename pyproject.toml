[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arbordesk"
version = "0.11.2"
description = "Model state for building single neuron cells: component stores, label definitions, mechanisms, parameters, probes, stimuli and simulation settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["neuroscience", "simulation", "neuron", "cable-cell", "modelling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["arbordesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
