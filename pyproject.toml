[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nlgrammar"
version = "0.1.0"
description = "Combinatory Categorial Grammar categories, combinatory rules and feature-structure unification"
requires-python = ">=3.10"
dependencies = []
keywords = ["ccg", "categorial grammar", "linguistics", "feature unification", "lexicon", "nlp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nlgrammar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
