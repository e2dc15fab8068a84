[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rumormundo"
version = "1.0.0"
description = "Discrete-event simulation of people spreading rumors while moving between places"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "discrete-event", "rumor", "agent-based", "event-list"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rumormundo = "rumormundo.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["rumormundo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
