[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skirmish"
version = "0.1.0"
description = "Turn-based battle simulation of swordsmen and hunters on a grid, driven by a command script."
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "game", "turn-based", "battle", "grid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
skirmish = "skirmish.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["skirmish"]

[tool.pytest.ini_options]
addopts = "-ra"
