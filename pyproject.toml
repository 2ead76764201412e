[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scalekit"
version = "0.1.0"
description = "SCALE (Simple Concatenated Aggregate Little-Endian) codec helpers: compact integers, depth-limited decoding and append-in-place encoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["scale", "codec", "serialization", "compact", "little-endian", "binary"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["scalekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
