[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gaiasys"
version = "0.1.0"
description = "Procedural planet generation, an orbit camera and the screen flow of a small planet-simulation game"
requires-python = ">=3.10"
keywords = ["planet", "procedural", "terrain", "noise", "simplex", "simulation", "game"]
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
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gaiasys = "gaiasys.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gaiasys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
