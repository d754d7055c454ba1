[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minidds"
version = "0.1.0"
description = "A small in-process publish/subscribe framework modelled on DDS: typed topics, publishers, subscribers and a pluggable transport."
requires-python = ">=3.10"
dependencies = []
keywords = ["dds", "pubsub", "publish-subscribe", "messaging", "middleware"]
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
    "Topic :: System :: Distributed Computing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minidds-demo = "minidds.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["minidds"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
