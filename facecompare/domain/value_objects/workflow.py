"""Workflow value objects."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ImageSlot(str, Enum):
    """The two images the workflow compares."""
    SELFIE = "selfie"
    GALLERY = "gallery"


class WorkflowPhase(str, Enum):
    IDLE = "idle"
    ACQUIRING = "acquiring"
    UPLOADING = "uploading"
    COMPARING = "comparing"
    MATCH = "match"
    NO_MATCH = "no_match"


class NotificationLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Notification(BaseModel):
    """One-shot message for the user."""
    title: str = Field(..., description="Short heading, e.g. 'Upload Error'")
    message: str = Field(..., description="Human readable detail")
    level: NotificationLevel = NotificationLevel.INFO
    error_type: Optional[str] = Field(None, description="Name of the exception behind the message, if any")
