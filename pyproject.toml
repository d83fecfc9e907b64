[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "myengine"
version = "0.1.0"
description = "Scene graph, transform and camera maths, and a command console for a small 3D engine"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "scene-graph", "bounding-box", "quaternion", "camera", "console", "commands"]
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["myengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
