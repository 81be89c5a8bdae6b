"""Shrink image files with ImageMagick's convert and report size savings."""

__version__ = "0.1.0"
__all__ = ["__version__"]