[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qlfront"
version = "0.1.0"
description = "Host-side support for a Sinclair QL emulator: options, devices, ROM loading, time, display decoding and helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sinclair", "ql", "qdos", "emulator", "68000", "minerva"]
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
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qlfront"]

[tool.hatch.build.targets.sdist]
include = ["qlfront", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
