[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "liveoverlay"
version = "0.1.0"
description = "Terminal stat panel for the active player, read from a game's local live client data API"
requires-python = ">=3.10"
keywords = ["game", "overlay", "live client", "stats"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "requests>=2.28",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "responses>=0.23",
]

[project.scripts]
liveoverlay = "liveoverlay.main:main"

[tool.hatch.build.targets.wheel]
packages = ["liveoverlay"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
