[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "viagens-hash"
version = "0.1.0"
description = "Chained hash table of trip records with an interactive menu and a trip file generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "chaining", "linked list", "trips", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
viagens-hash = "viagens_hash.cli:main"
viagens-gerar = "viagens_hash.generator:main"

[tool.setuptools.packages.find]
include = ["viagens_hash*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
