"""
S3 service for object storage operations using aioboto3.
"""
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, Optional

import aioboto3
from botocore.exceptions import ClientError, NoCredentialsError

from facecompare.core.config import Settings
from facecompare.core.exceptions import StorageError
from facecompare.core.logging import get_logger
from facecompare.domain.interfaces import ObjectStore

logger = get_logger(__name__)


def aws_client_args(settings: Settings) -> Dict[str, Any]:
    """Build client keyword arguments from settings.

    Explicit credentials are only passed when both halves are configured;
    otherwise botocore's default credential chain applies.
    """
    client_args: Dict[str, Any] = {
        'region_name': settings.AWS_REGION or "us-east-1"
    }
    if settings.AWS_ACCESS_KEY_ID and settings.AWS_SECRET_ACCESS_KEY:
        client_args['aws_access_key_id'] = settings.AWS_ACCESS_KEY_ID
        client_args['aws_secret_access_key'] = settings.AWS_SECRET_ACCESS_KEY
    return client_args


class S3Service(ObjectStore):
    """Service for writing the workflow images to AWS S3 using aioboto3."""

    def __init__(self, settings: Settings, session: Optional[aioboto3.Session] = None):
        """Store configuration but do not open a client yet.

        Args:
            settings: Settings providing the bucket, region and credentials
            session: aioboto3 session to open clients from (a new one by default)
        """
        self.bucket_name = settings.AWS_S3_BUCKET
        self.region_name = settings.AWS_REGION or "us-east-1"
        self._client_args = aws_client_args(settings)
        self._session = session or aioboto3.Session()

    @asynccontextmanager
    async def _get_client(self) -> AsyncGenerator[Any, None]:
        """Open a short-lived S3 client."""
        if 'aws_access_key_id' in self._client_args:
            logger.debug("Using explicit AWS credentials from config for aioboto3")
        else:
            logger.debug("Allowing aioboto3 to discover AWS credentials automatically")
        async with self._session.client("s3", **self._client_args) as s3:
            yield s3

    def object_url(self, key: str) -> str:
        return f"https://{self.bucket_name}.s3.{self.region_name}.amazonaws.com/{key}"

    async def put(self, key: str, body: bytes, content_type: str) -> str:
        """
        Upload bytes to S3, overwriting any object already stored under the key.

        Args:
            key: S3 object key
            body: Object contents
            content_type: MIME type stored with the object

        Returns:
            The S3 object URL

        Raises:
            StorageError: If no bucket is configured or the upload fails
        """
        if not self.bucket_name:
            raise StorageError("No S3 bucket configured. Set AWS_S3_BUCKET.", details={"key": key})

        logger.info("Uploading file to S3", key=key, bucket=self.bucket_name, size=len(body))
        try:
            async with self._get_client() as s3:
                await s3.put_object(
                    Bucket=self.bucket_name,
                    Key=key,
                    Body=body,
                    ContentType=content_type,
                )
        except NoCredentialsError as e:
            logger.error("AWS credentials not found", key=key, bucket=self.bucket_name)
            raise StorageError(
                "AWS credentials not found or configured correctly.",
                details={"key": key, "bucket": self.bucket_name},
            ) from e
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code')
            logger.error("Failed to upload file to S3 due to client error",
                         key=key, bucket=self.bucket_name, error_code=error_code, exc_info=True)
            if error_code == 'NoSuchBucket':
                message = f"Bucket not found: {self.bucket_name}"
            elif error_code in ('403', 'AccessDenied'):
                message = f"Access denied when uploading '{key}'. Check permissions."
            else:
                message = f"Failed to upload file '{key}' to S3: {e}"
            raise StorageError(
                message,
                details={"key": key, "bucket": self.bucket_name, "error_code": error_code},
            ) from e
        except Exception as e:
            logger.error("Unexpected error uploading file to S3",
                         key=key, bucket=self.bucket_name, error=str(e), exc_info=True)
            raise StorageError(
                f"Unexpected error uploading file '{key}': {e}",
                details={"key": key, "bucket": self.bucket_name},
            ) from e

        url = self.object_url(key)
        logger.info("Successfully uploaded file to S3", key=key, bucket=self.bucket_name)
        return url
