"""Service interfaces package."""
from .face_comparison import FaceComparisonService
from .media_source import MediaSource
from .object_store import ObjectStore

__all__ = ["FaceComparisonService", "MediaSource", "ObjectStore"]
