[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubengine"
version = "0.1.0"
description = "A tile-map raycasting game engine that renders into in-memory images: DDA raycasting, textured wall columns, minimap, map view, animated hand and player controls."
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "raycaster", "dda", "game-engine", "minimap", "first-person"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubengine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
