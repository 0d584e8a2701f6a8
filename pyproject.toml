[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tramsim"
version = "0.1.0"
description = "A small threaded tram line simulation with stops, tram models and random delays"
requires-python = ">=3.10"
dependencies = []
keywords = ["tram", "simulation", "public transport", "timetable"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["tramsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
