[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lachesis"
version = "0.1.0"
description = "Green-thread and cooperative task scheduling with timer-driven preemption points"
requires-python = ">=3.10"
dependencies = []
keywords = ["green threads", "scheduler", "preemption", "cooperative multitasking", "task queue"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lachesis = "lachesis.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lachesis"]

[tool.pytest.ini_options]
addopts = "-ra"
