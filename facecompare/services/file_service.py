"""Service for reading the bytes behind a local image handle."""
import asyncio
from pathlib import Path
from urllib.parse import unquote, urlparse

import requests

from facecompare.core.exceptions import FileServiceError
from facecompare.core.logging import get_logger
from facecompare.domain.entities.image import LocalImageHandle

logger = get_logger(__name__)


class FileService:
    """Service for handling file operations."""

    def __init__(self, timeout: float = 30.0):
        """Initialize the file service.

        Args:
            timeout: Timeout in seconds for downloading http(s) handles
        """
        self.timeout = timeout

    async def get_handle_bytes(self, handle: LocalImageHandle) -> bytes:
        """Get the image bytes a handle refers to.

        Args:
            handle: Handle returned by the media source

        Returns:
            Image bytes

        Raises:
            FileServiceError: If the bytes cannot be read or are empty
        """
        try:
            if handle.data is not None:
                content = handle.data
            else:
                scheme = urlparse(handle.uri).scheme.lower()
                if scheme in ("http", "https"):
                    content = await asyncio.to_thread(self._download, handle.uri)
                elif scheme in ("", "file"):
                    content = await asyncio.to_thread(self._local_path(handle.uri).read_bytes)
                else:
                    raise FileServiceError(
                        f"Unsupported image location: {handle.uri}",
                        details={"uri": handle.uri},
                    )
        except FileServiceError:
            raise
        except Exception as e:
            logger.error(
                "Failed to read image handle",
                uri=handle.uri,
                error=str(e),
                exc_info=True
            )
            raise FileServiceError(
                f"Failed to read image at {handle.uri}: {str(e)}",
                details={"uri": handle.uri},
            ) from e

        if not content:
            raise FileServiceError(f"Image at {handle.uri} is empty", details={"uri": handle.uri})

        logger.debug("Read image handle", uri=handle.uri, size=len(content))
        return content

    @staticmethod
    def _local_path(uri: str) -> Path:
        parsed = urlparse(uri)
        if parsed.scheme.lower() == "file":
            return Path(unquote(parsed.path))
        return Path(uri)

    def _download(self, uri: str) -> bytes:
        response = requests.get(uri, timeout=self.timeout)
        response.raise_for_status()
        return response.content
