"""A compact 2D game engine core: math, actors, components, collisions, physics, animation, camera and input."""

__version__ = "0.1.0"