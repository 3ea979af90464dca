[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tacgen"
version = "0.1.0"
description = "Three-address code model, printing, dead-code elimination and MIPS instruction records for a small C compiler"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "three-address code", "tac", "intermediate representation", "mips", "dead code elimination"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tacgen"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
