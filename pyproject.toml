[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ebiscan"
version = "0.1.0"
description = "Building blocks for reviewing a piped script's security risk before handing it to an interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "security",
    "script",
    "shell",
    "interpreter",
    "confirmation",
    "localization",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Natural Language :: English",
    "Natural Language :: Japanese",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ebiscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
