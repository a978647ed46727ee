[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grafkit"
version = "0.1.0"
description = "Read undirected multigraphs from adjacency-list files and report their basic properties"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "multigraph", "adjacency matrix", "incidence matrix", "graph theory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grafkit = "grafkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["grafkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
