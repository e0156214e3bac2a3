"""Custom exceptions for the face comparison workflow."""
from typing import Optional


class FaceCompareError(Exception):
    """Base exception for face comparison operations."""

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize face compare error.

        Args:
            message: Error description
            details: Additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MediaAccessError(FaceCompareError):
    """Base exception for camera and photo library access."""
    pass


class PermissionDeniedError(MediaAccessError):
    """Raised when the user has not granted camera or library access."""
    pass


class AcquisitionCancelledError(MediaAccessError):
    """Raised when the user dismisses the camera or picker without choosing an image."""
    pass


class AcquisitionEmptyError(MediaAccessError):
    """Raised when the picker returns without a usable image asset."""
    pass


class UploadError(FaceCompareError):
    """Base exception for getting an image into the object store."""
    pass


class FileServiceError(UploadError):
    """Raised when the bytes behind a local image handle cannot be read."""
    pass


class StorageError(UploadError):
    """Raised when the object store rejects or fails a write."""
    pass


class ComparisonError(FaceCompareError):
    """Raised when the face comparison service call fails."""
    pass


class MissingInputsError(FaceCompareError):
    """Raised when a comparison is requested before both images are uploaded."""
    pass
