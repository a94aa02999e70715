[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kgame"
version = "0.1.0"
description = "Small 2D game toolkit: vectors, complex numbers, 2x2 and 3x3 matrices, tile sheets and sprite animation"
requires-python = ">=3.10"
keywords = ["game", "2d", "vector", "matrix", "sprite", "tilemap", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["kgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
