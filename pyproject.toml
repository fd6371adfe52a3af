[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lanerunner"
version = "0.1.0"
description = "A three-lane side-scrolling runner game: switch lanes, jump over stones, burn energy to speed up."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "runner", "arcade", "pygame", "side-scroller"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
lanerunner = "lanerunner.main:main"

[tool.hatch.build.targets.wheel]
packages = ["lanerunner"]

[tool.pytest.ini_options]
addopts = "-ra"
