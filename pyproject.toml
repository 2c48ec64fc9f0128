[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logengine"
version = "1.3.0"
description = "A small logging engine with pattern layouts, sinks, INI file reading and a thread-safe queue."
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "log", "sink", "pattern", "layout", "ini"]
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
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["logengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
