[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robotfsm"
version = "0.1.0"
description = "An interactive finite state machine for a simple robot: move, shoot, calculate and handle errors."
requires-python = ">=3.10"
dependencies = []
keywords = ["fsm", "state-machine", "robot", "embedded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
robotfsm = "robotfsm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["robotfsm"]

[tool.pytest.ini_options]
addopts = "-ra"
