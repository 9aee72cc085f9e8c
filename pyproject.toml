[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grftools"
version = "0.1.0"
description = "Read GRF IDs and checksums, strip sprites from NewGRF containers, and handle NFO helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["grf", "newgrf", "nfo", "sprites", "transport tycoon"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grfid = "grftools.grfid:main"
grfstrip = "grftools.grfstrip:main"

[tool.hatch.build.targets.wheel]
packages = ["grftools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
