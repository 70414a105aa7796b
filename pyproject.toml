[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "riotty"
version = "0.1.0"
description = "Terminal emulator core pieces: grid selections, key bindings, tabs, timers and PTY messaging"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "selection", "key-bindings", "tabs", "scheduler"]
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
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["riotty*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
