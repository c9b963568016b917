[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "staticpp"
version = "0.1.0"
description = "A small static site generator that turns a Markdown blog tree into HTML"
requires-python = ">=3.10"
keywords = ["static site generator", "markdown", "blog", "html", "yaml front matter"]
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
    "Topic :: Internet :: WWW/HTTP :: Site Management",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "markdown",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ssg = "staticpp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["staticpp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
