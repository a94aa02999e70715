"""Small 2D game toolkit: vector, complex and matrix math, tile sheets and sprite animation."""

__version__ = "0.1.0"

__all__ = [
    "complex_number",
    "game_object",
    "matrix2",
    "matrix3",
    "sprite_animator",
    "tile_manager",
    "vector2",
]