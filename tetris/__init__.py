"""A falling-block puzzle game: pieces, game rules, and pygame drawing."""

__version__ = "0.1.0"
__all__ = ["game", "render", "tetrominoes"]