[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snowdefense"
version = "1.0.0"
description = "Arcade game: rotate a snowball cannon and knock parachuting penguins out of the sky before they land on your iceberg."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pygame", "penguins", "snowball"]
classifiers = [
    "Development Status :: 4 - Beta",
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
snowdefense = "snowdefense.app:main"

[tool.hatch.build.targets.wheel]
packages = ["snowdefense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
