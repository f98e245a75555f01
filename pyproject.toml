[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vinokit"
version = "0.9.1"
description = "Locate inference runtime installations, map its status codes and value types, and convert images into raw tensor bytes."
requires-python = ">=3.10"
keywords = ["inference", "tensor", "machine-learning", "image-conversion", "library-finder"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "numpy",
    "pillow",
]

[project.scripts]
tensor-converter = "vinokit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vinokit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
