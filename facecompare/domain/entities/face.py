"""Core face domain entities."""
from typing import Optional

from pydantic import BaseModel, Field


class BoundingBox(BaseModel):
    """Face bounding box as ratios of the overall image size."""
    left: float = Field(..., description="Left coordinate of the bounding box")
    top: float = Field(..., description="Top coordinate of the bounding box")
    width: float = Field(..., description="Width of the bounding box")
    height: float = Field(..., description="Height of the bounding box")


class Face(BaseModel):
    """Face reported by the comparison service."""
    confidence: Optional[float] = Field(None, description="Confidence that the box contains a face (0-100)")
    bounding_box: Optional[BoundingBox] = Field(None, description="Bounding box coordinates")
