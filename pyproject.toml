[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diagspan"
version = "0.1.0"
description = "Read a span of source text together with surrounding context lines for diagnostics."
requires-python = ">=3.10"
dependencies = []
keywords = ["diagnostics", "span", "source", "context", "errors"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["diagspan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
