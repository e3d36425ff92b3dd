"""Grid tile block editor and side-scrolling game objects drawn with pygame."""

__version__ = "0.1.0"