[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primesh"
version = "0.1.0"
description = "A small interactive shell loop with a status, directory and git-branch prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "prompt", "git", "readline", "terminal", "printf"]
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
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
primesh = "primesh.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["primesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
