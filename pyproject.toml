[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "centerpoint-tools"
version = "0.1.0"
description = "Configuration, interpolation, timing, message conversion and parameter loading helpers for CenterPoint lidar object detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["lidar", "centerpoint", "object detection", "interpolation", "perception"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["centerpoint_tools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
