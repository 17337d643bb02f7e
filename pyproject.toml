[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agentic_evolve"
version = "0.1.0"
description = "Pattern library engine that crystallizes verified code patterns for reuse by AI agents"
requires-python = ">=3.10"
dependencies = []
keywords = ["patterns", "code-generation", "templates", "matching", "agents"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["agentic_evolve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
