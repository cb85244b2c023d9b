[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestalgo"
version = "0.1.0"
description = "Classic competitive-programming algorithms: graph traversals, multi-pattern string matching and range-query structures."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "topological-sort",
    "strongly-connected-components",
    "articulation-points",
    "aho-corasick",
    "sparse-table",
    "segment-tree",
    "fenwick-tree",
    "treap",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["contestalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
