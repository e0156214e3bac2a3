"""In-memory state of the upload-and-compare workflow."""
from typing import Dict, Optional

from pydantic import BaseModel, Field

from ..value_objects.recognition import ComparisonResult
from ..value_objects.workflow import ImageSlot, WorkflowPhase
from .image import LocalImageHandle


class WorkflowState(BaseModel):
    """Everything the screen shows, held for the lifetime of one UI session."""
    handles: Dict[ImageSlot, LocalImageHandle] = Field(default_factory=dict)
    uploaded: Dict[ImageSlot, bool] = Field(
        default_factory=lambda: {slot: False for slot in ImageSlot}
    )
    comparison_result: ComparisonResult = ComparisonResult.UNKNOWN
    best_similarity: Optional[float] = None
    status_message: Optional[str] = None
    phase: WorkflowPhase = WorkflowPhase.IDLE

    @property
    def selfie(self) -> Optional[LocalImageHandle]:
        return self.handles.get(ImageSlot.SELFIE)

    @property
    def gallery(self) -> Optional[LocalImageHandle]:
        return self.handles.get(ImageSlot.GALLERY)

    @property
    def ready_to_compare(self) -> bool:
        """Both slots hold a handle whose upload succeeded."""
        return all(
            slot in self.handles and self.uploaded.get(slot, False)
            for slot in ImageSlot
        )

    @property
    def result_message(self) -> Optional[str]:
        if self.comparison_result is ComparisonResult.MATCH:
            return "Faces match!"
        if self.comparison_result is ComparisonResult.NO_MATCH:
            return "Faces do not match."
        return None
