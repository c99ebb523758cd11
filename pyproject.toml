[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emdb"
version = "0.9.0"
description = "Zero-copy value handles for byte ranges in memory-mapped regions or owned byte strings."
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "embedded", "kv", "mmap", "zero-copy", "memoryview"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["emdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
