[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "espconfig"
version = "0.1.0"
description = "Typed configuration items persisted as a single JSON document"
requires-python = ">=3.10"
dependencies = []
keywords = ["configuration", "settings", "json", "persistence"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
espconfig-demo = "espconfig.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["espconfig"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
