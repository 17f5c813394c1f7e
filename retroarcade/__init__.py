"""Small classic arcade games on pygame: breakout, galaxian, tank, space invaders, asteroids, pacman and a sandbox."""

__version__ = "0.1.0"