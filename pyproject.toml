[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "melice"
version = "0.1.0"
description = "Building blocks for small 2D games: animations, hitboxes, directions, dithered bitmaps, shooting patterns and small helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2d", "animation", "sprite", "hitbox", "dithering", "bullet", "sha256", "base64"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["melice"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
