"""Selfie / gallery face comparison backed by S3 and Rekognition."""

__version__ = "0.1.0"
