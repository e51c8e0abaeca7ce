[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sellarity"
version = "0.1.0"
description = "A terminal sales management system with an admin panel, customer ordering, checkout, ratings and reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["point-of-sale", "sales", "inventory", "terminal", "receipt"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sellarity = "sellarity.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sellarity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
