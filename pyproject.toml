[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toolkit"
version = "0.1.0"
description = "General-purpose helpers: lenient conversions, JSON detection and decoding, macro expansion, predicates, sampling, secrets and replayed shell sessions."
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "macro", "predicate", "sampler", "secrets", "replay", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["toolkit"]

[tool.pytest.ini_options]
addopts = "-ra"
