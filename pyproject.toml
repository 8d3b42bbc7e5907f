[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procmon-lite"
version = "0.1.0"
description = "A small Linux monitor that prints CPU and memory usage from /proc"
requires-python = ">=3.10"
dependencies = []
keywords = ["monitoring", "cpu", "memory", "procfs", "linux"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
procmon-lite = "procmon_lite.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["procmon_lite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
