[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cukesuite"
version = "0.1.0"
description = "Building blocks for a Gherkin scenario runner: tag filters, result storage, hook chains and file access"
requires-python = ">=3.10"
dependencies = []
keywords = ["bdd", "gherkin", "cucumber", "testing", "scenarios", "hooks"]
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
    "Topic :: Software Development :: Testing :: BDD",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cukesuite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
