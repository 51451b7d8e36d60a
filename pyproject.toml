[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kongclimb"
version = "0.1.0"
description = "A terminal platform game: climb ladders, dodge barrels and ghosts, and reach Pauline."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "arcade", "platformer", "ascii", "replay"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kongclimb = "kongclimb.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kongclimb"]

[tool.pytest.ini_options]
addopts = "-ra"
