"""Game logic toolkit: platformer physics, particle emitters, small arcade simulations and sound bookkeeping."""

__version__ = "0.1.0"

__all__ = [
    "arkanoid",
    "asteroids",
    "audio",
    "camera_math",
    "emitter",
    "geometry",
    "life",
    "particle_config",
    "platformer",
    "snake",
]