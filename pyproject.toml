[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmmlang"
version = "0.2.0"
description = "Runtime pieces for the C-- scripting language: typed values, operators, preprocessor, console/string/shell functions, a terminal debugger view and an editor launcher"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "scripting", "language", "preprocessor", "debugger"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cmmlang"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
