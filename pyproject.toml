[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpkit"
version = "0.1.0"
description = "Small algorithms for competitive programming: number theory, string hashing, union-find and graph traversals."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "algorithms",
    "graphs",
    "union-find",
    "bfs",
    "dfs",
    "topological-sort",
    "bipartite",
    "number-theory",
    "hashing",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cpkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
