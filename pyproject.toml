[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeon-archeology"
version = "0.1.0"
description = "You're a researcher who locked yourself in an underground lab to study ancient crystals"
requires-python = ">=3.11"
keywords = ["game", "pygame", "dungeon", "crystals", "pixel-art"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dungeon-archeology = "dungeon_archeology.game_manager:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeon_archeology"]

[tool.pytest.ini_options]
addopts = "-ra"
