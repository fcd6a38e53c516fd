[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ddmapgen"
version = "0.1.0"
description = "Waypoint-driven random map generation for DDNet-style race maps, with a mutation pipeline and econ helpers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "ddnet",
    "teeworlds",
    "map-generation",
    "procedural-generation",
    "random-walk",
    "econ",
]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ddmapgen"]

[tool.hatch.build.targets.sdist]
include = [
    "ddmapgen",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
