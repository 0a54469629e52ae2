[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "montyvm"
version = "0.1.0"
description = "An interpreter for Monty bytecode, a small stack and queue language"
requires-python = ">=3.10"
dependencies = []
keywords = ["monty", "bytecode", "interpreter", "stack", "queue"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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

[project.scripts]
monty = "montyvm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["montyvm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
