[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zinglang"
version = "0.1.0"
description = "Scanner and rule-driven phrase lexer for the ZScript scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "lexer", "scanner", "parser", "scripting", "syntax-tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zinglang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
