[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ina"
version = "0.1.0"
description = "Data helpers for a chat server assistant bot: colors, fuzzy search, custom identifiers, message anchors, validated component builders and media URLs."
requires-python = ">=3.10"
keywords = ["bot", "chat", "discord", "color", "custom-id", "modal", "emoji"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ina"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
