"""AWS service clients."""
from .rekognition import RekognitionService
from .s3 import S3Service

__all__ = ["RekognitionService", "S3Service"]
