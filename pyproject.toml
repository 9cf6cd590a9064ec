[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agmd"
version = "1.0.0"
description = "Manage layered AI agent configuration files written in Markdown"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["agents", "markdown", "configuration", "frontmatter", "registry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Documentation",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
agmd = "agmd.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["agmd"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
