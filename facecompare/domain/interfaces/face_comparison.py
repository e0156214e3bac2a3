"""Face comparison service interface."""
from abc import ABC, abstractmethod
from typing import Optional

from ..value_objects.recognition import FaceComparison


class FaceComparisonService(ABC):
    """Interface for comparing the face in one stored image against another."""

    @abstractmethod
    async def compare_faces(
        self,
        source_key: str,
        target_key: str,
        similarity_threshold: Optional[float] = None,
    ) -> FaceComparison:
        """
        Compare the largest face in the source object with the faces in the target object.

        Args:
            source_key: Object store key of the source image
            target_key: Object store key of the target image
            similarity_threshold: Minimum similarity (0-100) for a face to be reported
                as a match. Implementations fall back to their configured default.

        Returns:
            FaceComparison listing the matches the service reported

        Raises:
            ComparisonError: If the service call fails or the images cannot be compared
        """
        pass
