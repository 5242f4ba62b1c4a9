[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skat_engine"
version = "0.1.0"
description = "Cards, dealing and bidding estimates for the card game Skat"
requires-python = ">=3.10"
dependencies = []
keywords = ["skat", "cards", "card game", "bidding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skat_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
