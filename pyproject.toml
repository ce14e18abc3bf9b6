[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bmovie"
version = "0.1.0"
description = "Movie search service building blocks: standard JSON responses, configuration, logging, a WSGI search endpoint and small string utilities."
requires-python = ">=3.10"
dependencies = []
keywords = ["movies", "search", "wsgi", "json", "anagram", "brackets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bmovie-brackets = "bmovie.brackets:main"
bmovie-anagram = "bmovie.anagram:main"

[tool.hatch.build.targets.wheel]
packages = ["bmovie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
