[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "connect4"
version = "0.1.0"
description = "Connect Four against a negamax computer opponent, played in a resizable pygame window"
requires-python = ">=3.10"
keywords = ["connect-four", "game", "negamax", "solver", "bitboard", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
connect4 = "connect4.app:main"

[tool.hatch.build.targets.wheel]
packages = ["connect4"]

[tool.pytest.ini_options]
addopts = "-ra"
