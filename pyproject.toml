[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minifat"
version = "0.1.0"
description = "Read-only decoding of in-memory FAT32 volume images: boot sector, allocation table, cluster chains and directory entries"
requires-python = ">=3.10"
dependencies = []
keywords = ["fat32", "filesystem", "disk-image", "boot-sector", "cluster"]
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
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minifat"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
