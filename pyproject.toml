[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fplhelp"
version = "0.4.0"
description = "A simple tool to get coordinates for the making of a flight plan."
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["flight plan", "geocoding", "coordinates", "aviation", "openstreetmap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.gui-scripts]
fplhelp = "fplhelp.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fplhelp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
