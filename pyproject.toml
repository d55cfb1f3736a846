[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structbench"
version = "0.1.0"
description = "Integer heaps, hash table, AVL tree and weighted graph, driven by a timed command file"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "heap",
    "avl tree",
    "hash table",
    "graph",
    "dijkstra",
    "prim",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
structbench = "structbench.commands:main"

[tool.hatch.build.targets.wheel]
packages = ["structbench"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
