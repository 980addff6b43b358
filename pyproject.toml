[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "miinettest"
version = "0.1.0"
description = "Show local network details, find the active connection slot in a network configuration file, and time an HTTP request"
requires-python = ">=3.10"
dependencies = []
keywords = ["network", "ping", "latency", "http", "diagnostics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
miinettest = "miinettest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["miinettest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
