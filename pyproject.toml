[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "myeditor"
version = "0.1.0"
description = "A small read-only terminal text viewer with cursor movement, tab rendering and a status bar"
requires-python = ">=3.10"
dependencies = []
keywords = ["viewer", "terminal", "pager", "raw-mode", "ansi"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
myeditor = "myeditor.cli:main"
myeditor-keyecho = "myeditor.keyecho:main"
myeditor-tildes = "myeditor.tildes:main"

[tool.hatch.build.targets.wheel]
packages = ["myeditor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
