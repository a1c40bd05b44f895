[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dendritic"
version = "0.1.0"
description = "A small N-dimensional array library with element-wise, aggregate and linear-algebra operations plus data preprocessing helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["ndarray", "numerical", "linear-algebra", "preprocessing", "one-hot"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["dendritic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
