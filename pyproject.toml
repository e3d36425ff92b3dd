[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rockblocks"
version = "0.1.0"
description = "A grid tile block editor and side-scrolling game objects drawn with pygame"
requires-python = ">=3.10"
keywords = ["game", "level-editor", "tiles", "pygame", "platformer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rockblocks = "rockblocks.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rockblocks"]

[tool.pytest.ini_options]
addopts = "-ra"
