[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shrinkarena"
version = "0.1.0"
description = "An arcade shooter played inside a window that keeps shrinking; shots that reach an edge push the window back out."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "shooter", "pygame", "shrinking window"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
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
shrinkarena = "shrinkarena.app:main"

[tool.hatch.build.targets.wheel]
packages = ["shrinkarena"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
