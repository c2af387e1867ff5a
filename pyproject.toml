[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wirefdf"
version = "0.1.0"
description = "Isometric wireframe viewer for height-map files"
requires-python = ">=3.10"
keywords = ["wireframe", "isometric", "heightmap", "fdf", "viewer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wirefdf = "wirefdf.app:main"

[tool.hatch.build.targets.wheel]
packages = ["wirefdf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
