[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "techrot"
version = "0.1.0"
description = "Core model for a post-apocalyptic text role-playing game: items, weapons, character stats and a player sheet."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "text-based", "role-playing", "stats"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
techrot = "techrot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["techrot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
