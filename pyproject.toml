[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "takebefore"
version = "0.0.1"
description = "A lazy view over an iterable that stops before the first element equal to a delimiter"
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "view", "lazy", "delimiter", "sequence", "pipeline"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
takebefore-demo = "takebefore.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["takebefore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
