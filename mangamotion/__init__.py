"""MangaMotion: turn a still manga panel into a CSS-driven animation loop."""

__version__ = "0.1.0"
