[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bucketkit"
version = "0.1.0"
description = "Building blocks for tools that copy and sync objects between local storage and buckets: logging, statistics, exclude filters, content-type guessing, sync strategies and command generation"
requires-python = ">=3.10"
dependencies = []
keywords = ["sync", "copy", "bucket", "mirroring", "object-storage", "exclude", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Mirroring",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bucketkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
