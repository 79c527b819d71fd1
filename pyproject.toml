[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mhshell"
version = "0.1.0"
description = "A small shell core that parses the environment, turns typed tokens into a command, finds it on PATH and runs it with output redirection"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "minishell", "redirection", "environment", "tokens"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: System Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mhshell = "mhshell.executor:main"

[tool.hatch.build.targets.wheel]
packages = ["mhshell"]

[tool.pytest.ini_options]
addopts = "-ra"
