"""Local image handle entity."""
from typing import Optional

from pydantic import BaseModel, Field


class LocalImageHandle(BaseModel):
    """Opaque reference to an image captured or picked on this device.

    The bytes are either carried inline (``data``) or resolved from ``uri``
    when the image is uploaded.
    """
    uri: str = Field(..., description="Local path, file:// or http(s):// URI of the image")
    data: Optional[bytes] = Field(None, description="Image bytes when the source hands them over directly")
    file_name: Optional[str] = Field(None, description="Original file name, if known")
    mime_type: Optional[str] = Field(None, description="MIME type reported by the source")
    width: Optional[int] = Field(None, description="Image width in pixels, if known")
    height: Optional[int] = Field(None, description="Image height in pixels, if known")

    def __repr__(self) -> str:
        size = len(self.data) if self.data is not None else None
        return f"LocalImageHandle(uri={self.uri!r}, inline_bytes={size})"
