[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ajisai"
version = "0.5.0"
description = "Fetch shared rule and prompt presets and write them out for AI coding agents."
requires-python = ">=3.10"
keywords = ["ai", "agents", "prompts", "rules", "presets", "markdown", "front-matter"]
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
    "Topic :: Software Development :: Code Generators",
]
dependencies = [
    "pyyaml",
    "markdown-it-py",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ajisai"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
