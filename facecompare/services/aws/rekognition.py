"""
Rekognition service for comparing faces stored in S3, using aioboto3.
"""
from typing import Any, Dict, List, Optional

import aioboto3
from botocore.exceptions import ClientError, NoCredentialsError

from facecompare.core.config import Settings
from facecompare.core.exceptions import ComparisonError
from facecompare.core.logging import get_logger
from facecompare.domain.entities.face import BoundingBox, Face
from facecompare.domain.interfaces import FaceComparisonService
from facecompare.domain.value_objects.recognition import FaceComparison, FaceMatch

from .s3 import aws_client_args

logger = get_logger(__name__)

# Error codes Rekognition uses for problems with the images themselves
IMAGE_ERROR_CODES = {
    'InvalidParameterException': "No face could be found in one of the images.",
    'InvalidImageFormatException': "One of the images is not a supported format.",
    'ImageTooLargeException': "One of the images is too large to compare.",
    'InvalidS3ObjectException': "One of the images could not be read from S3.",
}


def _to_face(face_data: Dict[str, Any]) -> Face:
    box = face_data.get('BoundingBox')
    return Face(
        confidence=face_data.get('Confidence'),
        bounding_box=BoundingBox(
            left=box.get('Left', 0.0),
            top=box.get('Top', 0.0),
            width=box.get('Width', 0.0),
            height=box.get('Height', 0.0),
        ) if box else None,
    )


def parse_compare_faces_response(response: Dict[str, Any]) -> FaceComparison:
    """Convert a CompareFaces response into a FaceComparison.

    Args:
        response: Raw response dictionary from Rekognition

    Returns:
        FaceComparison with one FaceMatch per reported match
    """
    matches: List[FaceMatch] = [
        FaceMatch(similarity=match['Similarity'], face=_to_face(match.get('Face', {})))
        for match in response.get('FaceMatches', [])
    ]
    source_face = response.get('SourceImageFace') or {}
    return FaceComparison(
        face_matches=matches,
        unmatched_face_count=len(response.get('UnmatchedFaces', [])),
        source_face_confidence=source_face.get('Confidence'),
    )


class RekognitionService(FaceComparisonService):
    """Compares two objects in the configured bucket with AWS Rekognition."""

    def __init__(self, settings: Settings, session: Optional[aioboto3.Session] = None):
        """
        Args:
            settings: Settings providing the bucket, region, credentials and default threshold
            session: aioboto3 session to open clients from (a new one by default)
        """
        self.bucket_name = settings.AWS_S3_BUCKET
        self.similarity_threshold = settings.SIMILARITY_THRESHOLD
        self._client_args = aws_client_args(settings)
        self._session = session or aioboto3.Session()

    def _s3_image(self, key: str) -> Dict[str, Any]:
        return {'S3Object': {'Bucket': self.bucket_name, 'Name': key}}

    async def compare_faces(
        self,
        source_key: str,
        target_key: str,
        similarity_threshold: Optional[float] = None,
    ) -> FaceComparison:
        """
        Compare the face in ``source_key`` with the faces in ``target_key``.

        Rekognition only returns matches whose similarity reaches the
        threshold, so the boundary policy is the service's own.

        Args:
            source_key: S3 key of the source image (the selfie)
            target_key: S3 key of the target image (the gallery photo)
            similarity_threshold: Minimum similarity (0-100), defaults to settings

        Returns:
            FaceComparison with the reported matches

        Raises:
            ComparisonError: If the call fails for any reason
        """
        threshold = self.similarity_threshold if similarity_threshold is None else similarity_threshold
        details = {
            "source_key": source_key,
            "target_key": target_key,
            "bucket": self.bucket_name,
            "threshold": threshold,
        }
        logger.info("Comparing faces", **details)

        try:
            async with self._session.client("rekognition", **self._client_args) as rekognition:
                response = await rekognition.compare_faces(
                    SourceImage=self._s3_image(source_key),
                    TargetImage=self._s3_image(target_key),
                    SimilarityThreshold=threshold,
                )
        except NoCredentialsError as e:
            logger.error("AWS credentials not found", **details)
            raise ComparisonError(
                "AWS credentials not found or configured correctly.", details=details
            ) from e
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code')
            logger.error("Face comparison failed due to client error",
                         error_code=error_code, exc_info=True, **details)
            message = IMAGE_ERROR_CODES.get(error_code, f"Failed to compare faces: {e}")
            raise ComparisonError(message, details={**details, "error_code": error_code}) from e
        except Exception as e:
            logger.error("Unexpected error comparing faces", error=str(e), exc_info=True, **details)
            raise ComparisonError(f"Unexpected error comparing faces: {e}", details=details) from e

        comparison = parse_compare_faces_response(response)
        logger.info(
            "Face comparison complete",
            matches_count=len(comparison.face_matches),
            unmatched_count=comparison.unmatched_face_count,
            best_similarity=comparison.best_similarity,
        )
        return comparison
