"""Camera and photo library interface."""
from abc import ABC, abstractmethod

from ..value_objects.media import PickerOptions, PickerResult


class MediaSource(ABC):
    """Interface for acquiring images from the device."""

    @abstractmethod
    async def request_permissions(self) -> bool:
        """Ask for camera and library access. Returns True when granted."""
        pass

    @abstractmethod
    async def capture_from_camera(self, options: PickerOptions) -> PickerResult:
        """
        Open the camera.

        Raises:
            PermissionDeniedError: If camera access was refused
        """
        pass

    @abstractmethod
    async def pick_from_library(self, options: PickerOptions) -> PickerResult:
        """
        Open the photo library.

        Raises:
            PermissionDeniedError: If library access was refused
        """
        pass
