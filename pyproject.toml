[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polyshade"
version = "0.1.0"
description = "3D vector math, polyhedron meshes and deferred shader uniform values for small renderers"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "geometry", "vector", "rotation", "polyhedron", "mesh", "shader", "uniform"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["polyshade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
