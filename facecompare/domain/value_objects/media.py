"""Camera and photo library value objects."""
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class PickerOptions(BaseModel):
    """Options passed to the camera or the photo library picker."""
    images_only: bool = Field(True, description="Restrict the picker to still images")
    allows_editing: bool = Field(True, description="Let the user crop before confirming")
    aspect: Tuple[int, int] = Field((4, 3), description="Crop aspect ratio when editing is allowed")
    quality: float = Field(1.0, ge=0.0, le=1.0, description="Compression quality, 1.0 keeps full quality")


class ImageAsset(BaseModel):
    """One image returned by a picker."""
    uri: Optional[str] = Field(None, description="Where the picked image can be read from")
    data: Optional[bytes] = Field(None, description="Image bytes, for sources that hand them over directly")
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class PickerResult(BaseModel):
    """Outcome of a camera capture or library pick."""
    canceled: bool = Field(False, description="True when the user dismissed the picker")
    assets: List[ImageAsset] = Field(default_factory=list, description="Picked images, first one is used")
