[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sukakpak"
version = "0.1.0"
description = "Core of a small rendering framework: asset handles, deferred freeing, meshes, input events, shader metadata and a headless backend"
requires-python = ">=3.10"
dependencies = []
keywords = ["rendering", "game", "mesh", "shader", "assets", "framework"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sukakpak"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
