[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nextline"
version = "0.1.0"
description = "Buffered line reading from file descriptors and streams, with small string, memory and output helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["readline", "lines", "file descriptor", "strings", "buffer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nextline = "nextline.reader:main"

[tool.hatch.build.targets.wheel]
packages = ["nextline"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
