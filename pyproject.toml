[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "burgerrun"
version = "0.1.0"
description = "A side-scrolling runner game: collect coins, dodge demons and thieves, and reach the store before closing time."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "runner", "side-scroller", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
burgerrun = "burgerrun.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["burgerrun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
