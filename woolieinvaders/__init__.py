"""A grid-based pixel-art arcade shooter built on pygame."""

__version__ = "1.0.0"