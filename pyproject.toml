[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "retroarcade"
version = "0.1.0"
description = "Small classic arcade games on pygame: breakout, galaxian, tank, space invaders, asteroids, pacman and an enemy-path sandbox."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["arcade", "game", "breakout", "asteroids", "pacman", "space invaders", "galaxian", "tank", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
retroarcade-breakout = "retroarcade.breakout:main"
retroarcade-galaxian = "retroarcade.galaxian:main"
retroarcade-sandbox = "retroarcade.sandbox:main"
retroarcade-tank = "retroarcade.tank:main"
retroarcade-space-invaders = "retroarcade.space_invaders:main"
retroarcade-asteroids = "retroarcade.asteroids:main"
retroarcade-pacman = "retroarcade.pacman:main"

[tool.hatch.build.targets.wheel]
packages = ["retroarcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
