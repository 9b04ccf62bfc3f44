[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frogcross"
version = "1.0.0"
description = "A colourful, configurable frog-crossing arcade game for the terminal, with user profiles and a leaderboard"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "frogger", "terminal", "ansi", "leaderboard"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
frogcross = "frogcross.game:main"

[tool.hatch.build.targets.wheel]
packages = ["frogcross"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
