[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zorkxplorer"
version = "0.1.0"
description = "Branching text-adventure engine driven by YAML story files"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["text adventure", "interactive fiction", "yaml", "graphviz", "dot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
zorkxplorer = "zorkxplorer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["zorkxplorer"]

[tool.pytest.ini_options]
addopts = "-ra"
