[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdsitegen"
version = "0.1.0"
description = "A small static site generator that turns Markdown pages into HTML using a template"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "html", "static site", "generator"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Internet :: WWW/HTTP :: Site Management",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mdsitegen = "mdsitegen.cli:main"
mdsitegen-serve = "mdsitegen.server:main"

[tool.hatch.build.targets.wheel]
packages = ["mdsitegen"]

[tool.pytest.ini_options]
addopts = "-ra"
