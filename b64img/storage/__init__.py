"""Storage layer - output paths and image file writing."""

from .writer import ImageWriter

__all__ = ["ImageWriter"]
