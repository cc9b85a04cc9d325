[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdthat"
version = "0.7.1"
description = "Markdown toolkit building blocks: lenient URL parsing, percent-encoding, rule ordering, source maps and text helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "url", "percent-encoding", "commonmark", "parser"]
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
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mdthat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
