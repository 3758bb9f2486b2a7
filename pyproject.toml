[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duikit"
version = "0.1.0"
description = "Core value types for UI code: ARGB colours, integer geometry, affine matrices, ranges, lengths and a dynamic value tree."
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "geometry", "color", "matrix", "rect", "range", "value-tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["duikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
