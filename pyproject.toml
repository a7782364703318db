[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "docvpdf"
version = "0.0.1"
description = "Building blocks for reading PDF documents: object model, string and whitespace parsing, stream filters and file identifiers"
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "parser", "document", "flate", "zlib"]
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
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["docvpdf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
