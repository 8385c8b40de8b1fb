[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "davbrowse"
version = "1.0.0"
description = "Building blocks for a WebDAV file browser: PROPFIND requests, server bookmarks, list models, sorting, filtering and settings"
requires-python = ">=3.10"
keywords = ["webdav", "propfind", "file-browser", "dav", "client"]
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
    "Topic :: Internet :: WWW/HTTP",
]
dependencies = [
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["davbrowse"]

[tool.hatch.build.targets.sdist]
include = ["davbrowse", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
