[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "silkengine"
version = "0.1.0"
description = "A small 2D game engine core: vector math, actors and components, collisions, rigid bodies, animation state machines and a game world loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "2d", "physics", "collision", "animation"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["silkengine"]

[tool.pytest.ini_options]
addopts = "-ra"
