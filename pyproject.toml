[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poppingpenguin"
version = "0.1.0"
description = "A command-line tool for shrinking image files and reporting size statistics"
requires-python = ">=3.10"
keywords = ["image", "compression", "imagemagick", "shrink", "cli"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]
dependencies = [
    "click>=8.0",
    "pyyaml>=6.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
poppingpenguin = "poppingpenguin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["poppingpenguin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
