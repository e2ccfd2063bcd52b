"""Game state, keyboard handling and grid movement for a raycasting engine, with text utilities."""

__version__ = "0.1.0"