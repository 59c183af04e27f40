[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "quadkit"
version = "0.1.0"
description = "Pure-Python game logic toolkit: platformer physics, particle emitters, small arcade simulations and sound bookkeeping"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "physics", "platformer", "particles", "simulation", "arcade"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["quadkit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
