"""Rules, state and pygame drawing for a falling-block puzzle game."""

__version__ = "0.1.0"