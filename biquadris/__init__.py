"""Two-player falling-block puzzle game with a text display and command interpreter."""

__version__ = "0.1.0"