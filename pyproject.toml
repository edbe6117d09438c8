[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "woolieinvaders"
version = "1.0.0"
description = "A small grid-based arcade shooter: defend the shop from waves of invaders before time runs out."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "pixel-art", "pygame", "shooter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
woolieinvaders = "woolieinvaders.app:main"

[tool.hatch.build.targets.wheel]
packages = ["woolieinvaders"]

[tool.pytest.ini_options]
addopts = "-ra"
