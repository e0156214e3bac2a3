"""Face comparison value objects."""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from ..entities.face import Face


class ComparisonResult(str, Enum):
    """Outcome shown to the user."""
    UNKNOWN = "unknown"
    MATCH = "match"
    NO_MATCH = "no_match"


class FaceMatch(BaseModel):
    """A face in the target image that matched the source face."""
    similarity: float = Field(..., description="Similarity score with the source face (0-100)")
    face: Face = Field(..., description="Matched face in the target image")


class FaceComparison(BaseModel):
    """Result of comparing the source image against the target image.

    The service only reports matches at or above the requested threshold,
    so any entry in ``face_matches`` counts as a match.
    """
    face_matches: List[FaceMatch] = Field(default_factory=list, description="Faces above the threshold")
    unmatched_face_count: int = Field(0, description="Target faces below the threshold")
    source_face_confidence: Optional[float] = Field(None, description="Detection confidence of the source face")

    @property
    def is_match(self) -> bool:
        return len(self.face_matches) > 0

    @property
    def best_similarity(self) -> Optional[float]:
        if not self.face_matches:
            return None
        return max(match.similarity for match in self.face_matches)
