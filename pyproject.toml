[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flappyduck"
version = "1.0.0"
description = "A side-scrolling arcade game: steer a duck through coloured pipes and collect power-ups"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "flappy", "pygame", "side-scroller"]
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
flappyduck = "flappyduck.app:main"

[tool.hatch.build.targets.wheel]
packages = ["flappyduck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
