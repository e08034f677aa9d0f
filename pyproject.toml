[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "breakoutxt"
version = "0.1.0"
description = "A small Breakout arcade game with a splash screen, main menu and volume settings."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["breakout", "arcade", "game", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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
test = [
    "pytest",
]

[project.scripts]
breakoutxt = "breakoutxt.app:main"

[tool.hatch.build.targets.wheel]
packages = ["breakoutxt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
