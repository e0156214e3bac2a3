"""Value objects package."""
from .media import ImageAsset, PickerOptions, PickerResult
from .recognition import ComparisonResult, FaceComparison, FaceMatch
from .workflow import ImageSlot, Notification, NotificationLevel, WorkflowPhase

__all__ = [
    "ComparisonResult",
    "FaceComparison",
    "FaceMatch",
    "ImageAsset",
    "ImageSlot",
    "Notification",
    "NotificationLevel",
    "PickerOptions",
    "PickerResult",
    "WorkflowPhase",
]
