[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tablescene"
version = "0.1.0"
description = "Procedural cylinder and sphere meshes, a first-person camera, input controls and 4x4 matrix helpers"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["mesh", "geometry", "cylinder", "sphere", "camera", "3d", "matrix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tablescene"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
