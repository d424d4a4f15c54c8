[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parsestream"
version = "0.1.0"
description = "Input streams for parsers: position tracking, backtracking buffers, spans, byte readers and structured parse errors."
requires-python = ">=3.10"
dependencies = []
keywords = ["parser", "parsing", "stream", "backtracking", "position", "parse-error"]
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
    "Topic :: Text Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["parsestream"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
