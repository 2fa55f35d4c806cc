"""Interactive biomorph breeding with pygame."""

__version__ = "0.1.0"
