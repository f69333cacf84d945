[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blackjack"
version = "0.1.0"
description = "A terminal blackjack game with card art, betting and a simple dealer."
requires-python = ">=3.10"
dependencies = []
keywords = ["blackjack", "cards", "game", "terminal", "casino"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
blackjack = "blackjack.game:main"

[tool.hatch.build.targets.wheel]
packages = ["blackjack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
