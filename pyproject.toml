[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cycleofvalor"
version = "0.1.0"
description = "Core logic of a turn-based isometric village defence game: tile geometry, path finding and screen flow"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "turn-based", "isometric", "tiles", "pathfinding"]
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
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cycleofvalor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
