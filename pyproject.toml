[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordtail"
version = "0.1.0"
description = "Print the last lines of a file and find the most frequent words, backed by a small chained hash table"
requires-python = ">=3.10"
dependencies = []
keywords = ["tail", "word count", "hash table", "text", "filter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordtail-tail = "wordtail.tail:main"
maxwordcount = "wordtail.maxwordcount:main"

[tool.hatch.build.targets.wheel]
packages = ["wordtail"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
