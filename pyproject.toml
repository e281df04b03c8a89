[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "twentyone"
version = "0.1.0"
description = "Terminal blackjack against a dealer bot or a second player, with bets, a leaderboard and a coin clicker"
requires-python = ">=3.10"
dependencies = []
keywords = ["blackjack", "twenty-one", "cards", "game", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
twentyone = "twentyone.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["twentyone"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
