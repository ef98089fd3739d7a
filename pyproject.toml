[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cgmesh"
version = "0.1.0"
description = "Generate triangle meshes of geometric figures and Bezier patches as Wavefront OBJ files, and build solar-system scene descriptions"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "wavefront", "obj", "bezier", "geometry", "3d", "scene"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
generator = "cgmesh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cgmesh"]

[tool.pytest.ini_options]
addopts = "-ra"
