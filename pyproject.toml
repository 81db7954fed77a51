[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "verimeta"
version = "0.1.0"
description = "Checksum database files, path-string helpers, chunked file hashing and formatting tools for file integrity checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["checksum", "sha256", "integrity", "verification", "hash", "json"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["verimeta"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
