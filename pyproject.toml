[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flapbird"
version = "0.1.0"
description = "A small Flappy Bird style arcade game on a tiny component-based 2D engine"
requires-python = ">=3.10"
keywords = ["game", "arcade", "flappy", "pygame", "2d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
flapbird = "flapbird.game:main"

[tool.hatch.build.targets.wheel]
packages = ["flapbird"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
