[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wcstl"
version = "0.1.0"
description = "Container, iterator and algorithm toolkit modelled on the standard template library"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "iterator", "algorithms", "containers", "stl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wcstl-demo = "wcstl.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["wcstl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
