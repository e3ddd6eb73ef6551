[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kpworks"
version = "1.0.0"
description = "Small numerical and data-structure exercises: Taylor series, root finding, sparse matrices, ring lists, keyed tables and hardware records"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "taylor-series",
    "root-finding",
    "sparse-matrix",
    "ring-list",
    "shaker-sort",
    "binary-search",
    "binary-records",
]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kpworks-taylor = "kpworks.taylor:main"
kpworks-roots = "kpworks.roots:main"
kpworks-sparse = "kpworks.sparse_cli:main"
kpworks-ringlist = "kpworks.ringlist_cli:main"
kpworks-table = "kpworks.table_cli:main"
kpworks-person-dump = "kpworks.person:main"
kpworks-person-table = "kpworks.person_table:main"

[tool.hatch.build.targets.wheel]
packages = ["kpworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
