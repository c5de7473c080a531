[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mysqlop"
version = "0.1.0"
description = "Helpers for running MySQL InnoDB clusters: resource builders, metrics, signal handling and a MySQL Shell wrapper"
requires-python = ">=3.10"
dependencies = []
keywords = ["mysql", "innodb", "cluster", "kubernetes", "operator", "mysqlsh"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: System :: Clustering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mysqlop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
