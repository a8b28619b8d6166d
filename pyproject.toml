[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modelhelper"
version = "0.1.0"
description = "Helpers for model-driven code generation: name casing, YAML entity sources, code and project templates, text tables and trees."
requires-python = ">=3.10"
dependencies = [
    "cryptography",
    "pyyaml",
    "jinja2",
]
keywords = [
    "code-generation",
    "templates",
    "casing",
    "entities",
    "yaml",
    "scaffolding",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["modelhelper"]

[tool.hatch.build.targets.sdist]
include = [
    "modelhelper",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
