[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dangame"
version = "0.1.0"
description = "A small vertical-scrolling aircraft game built on a scene graph and a state stack"
requires-python = ">=3.10"
keywords = ["game", "scrolling", "aircraft", "scene-graph", "state-stack", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dangame = "dangame.game_app:main"

[tool.hatch.build.targets.wheel]
packages = ["dangame"]

[tool.pytest.ini_options]
addopts = "-ra"
