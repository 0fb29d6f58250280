[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtree2d"
version = "0.1.0"
description = "A small in-memory two-dimensional R-tree for rectangles with region, exact and nearest-neighbour search"
requires-python = ">=3.10"
dependencies = []
keywords = ["r-tree", "spatial index", "rectangle", "nearest neighbour", "geometry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
rtree2d-demo = "rtree2d.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rtree2d"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
