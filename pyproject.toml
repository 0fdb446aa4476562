[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carsim"
version = "0.1.0"
description = "A small interactive car simulator: people, bank accounts, vehicles and dealerships, saved as JSON."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "cli", "vehicles", "dealership", "banking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
carsim = "carsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["carsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
