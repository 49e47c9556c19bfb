[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contentkit"
version = "0.5.2"
description = "Query builder, data models and service clients for a headless content management API"
requires-python = ">=3.10"
dependencies = []
keywords = ["cms", "content", "api", "client", "query"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["contentkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
