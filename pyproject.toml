[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sagengine"
version = "0.1.0"
description = "A small 3D engine core: scene graph, cameras and lights, queued input events, render passes and procedural meshes."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["scene graph", "rendering", "camera", "events", "mesh", "3d"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sagengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
