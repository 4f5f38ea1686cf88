[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gdsaveparse"
version = "0.1.0"
description = "Decode Grim Dawn character, stash and formula save files into JSON"
requires-python = ">=3.10"
dependencies = []
keywords = ["grim dawn", "save file", "parser", "json", "binary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats :: JSON",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gdsaveparse = "gdsaveparse.cli:main"
gdsaveparse-server = "gdsaveparse.server:main"

[tool.hatch.build.targets.wheel]
packages = ["gdsaveparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
