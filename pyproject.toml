[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "vermada"
version = "1.0.1"
description = "Game logic for a side-scrolling platformer: JSON stage data, entities, stage editing, credits and configuration"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "side-scrolling", "level-editor", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["vermada*"]

[tool.pytest.ini_options]
addopts = "-ra"
