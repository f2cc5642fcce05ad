[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "engine2d"
version = "1.0.0"
description = "A small 2D engine: vector math, bounds, transforms, colours, scenes and OpenGL quad and grid shapes drawn through pyglet"
requires-python = ">=3.10"
dependencies = [
    "pyglet",
]
keywords = ["2d", "engine", "game", "opengl", "pyglet", "scene", "vector", "graphics"]
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
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
engine2d-demo = "engine2d.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["engine2d"]

[tool.pytest.ini_options]
addopts = "-ra"
