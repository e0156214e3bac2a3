"""Object store interface."""
from abc import ABC, abstractmethod


class ObjectStore(ABC):
    """Interface for writing named blobs to remote storage."""

    @abstractmethod
    async def put(self, key: str, body: bytes, content_type: str) -> str:
        """
        Store ``body`` under ``key``, replacing whatever was there.

        Args:
            key: Object key
            body: Object contents
            content_type: MIME type recorded with the object

        Returns:
            Location of the stored object

        Raises:
            StorageError: If the write fails
        """
        pass
