[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pngme"
version = "0.1.0"
description = "Hide, read and remove text messages stored in extra chunks of PNG files"
requires-python = ">=3.10"
dependencies = []
keywords = ["png", "chunk", "crc", "message", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pngme = "pngme.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pngme"]

[tool.pytest.ini_options]
addopts = "-ra"
