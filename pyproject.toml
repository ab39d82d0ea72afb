[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "judgebox"
version = "0.1.0"
description = "Solvers for classic competitive-programming problems: graphs, number theory, dynamic programming, search, geometry and simulation."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "dynamic-programming",
    "graphs",
    "union-find",
    "dynamic-connectivity",
    "geometry",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
judgebox = "judgebox.cli:main"
judgebox-gendata = "judgebox.connectivity_data:main"

[tool.hatch.build.targets.wheel]
packages = ["judgebox"]

[tool.hatch.build.targets.sdist]
include = ["judgebox", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
