[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tunnelrun"
version = "0.1.0"
description = "A terminal game: steer down a winding tunnel without touching the walls"
requires-python = ">=3.10"
keywords = ["game", "terminal", "arcade", "tunnel"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tunnelrun = "tunnelrun.game:main"

[tool.hatch.build.targets.wheel]
packages = ["tunnelrun"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
