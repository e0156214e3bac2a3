"""Domain entities package."""
from .face import BoundingBox, Face
from .image import LocalImageHandle

__all__ = ["BoundingBox", "Face", "LocalImageHandle"]
