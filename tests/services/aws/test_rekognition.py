"""Tests for the Rekognition face comparison client."""
import pytest
from botocore.exceptions import ClientError

from facecompare.core.exceptions import ComparisonError
from facecompare.services.aws.rekognition import RekognitionService, parse_compare_faces_response

COMPARE_RESPONSE = {
    "SourceImageFace": {
        "BoundingBox": {"Width": 0.5, "Height": 0.6, "Left": 0.2, "Top": 0.1},
        "Confidence": 99.8,
    },
    "FaceMatches": [
        {
            "Similarity": 95.0,
            "Face": {
                "BoundingBox": {"Width": 0.3, "Height": 0.4, "Left": 0.1, "Top": 0.2},
                "Confidence": 99.9,
            },
        }
    ],
    "UnmatchedFaces": [
        {"BoundingBox": {"Width": 0.1, "Height": 0.1, "Left": 0.7, "Top": 0.7}, "Confidence": 98.0}
    ],
}


def test_parse_response():
    comparison = parse_compare_faces_response(COMPARE_RESPONSE)

    assert comparison.is_match is True
    assert comparison.best_similarity == 95.0
    assert comparison.unmatched_face_count == 1
    assert comparison.source_face_confidence == 99.8
    face = comparison.face_matches[0].face
    assert face.confidence == 99.9
    assert face.bounding_box.left == 0.1
    assert face.bounding_box.height == 0.4


def test_parse_empty_response():
    comparison = parse_compare_faces_response({"FaceMatches": [], "UnmatchedFaces": []})

    assert comparison.is_match is False
    assert comparison.best_similarity is None
    assert comparison.source_face_confidence is None


class TestRekognitionService:

    async def test_compare_references_stored_objects(self, settings, session):
        session.responses["compare_faces"] = COMPARE_RESPONSE
        service = RekognitionService(settings, session=session)

        comparison = await service.compare_faces("selfie.jpg", "gallery.jpg")

        assert comparison.is_match is True
        assert session.client_requests[0][0] == "rekognition"
        assert session.fake_client.calls == [(
            "compare_faces",
            {
                "SourceImage": {"S3Object": {"Bucket": "test-bucket", "Name": "selfie.jpg"}},
                "TargetImage": {"S3Object": {"Bucket": "test-bucket", "Name": "gallery.jpg"}},
                "SimilarityThreshold": 90.0,
            },
        )]

    async def test_explicit_threshold(self, settings, session):
        service = RekognitionService(settings, session=session)

        await service.compare_faces("selfie.jpg", "gallery.jpg", similarity_threshold=75.0)

        assert session.fake_client.calls[0][1]["SimilarityThreshold"] == 75.0

    async def test_no_matches(self, settings, session):
        session.responses["compare_faces"] = {"FaceMatches": [], "UnmatchedFaces": []}

        comparison = await RekognitionService(settings, session=session).compare_faces("selfie.jpg", "gallery.jpg")

        assert comparison.is_match is False

    async def test_no_face_in_image(self, settings, session):
        session.errors["compare_faces"] = ClientError(
            {"Error": {"Code": "InvalidParameterException", "Message": "Request has invalid parameters"}},
            "CompareFaces",
        )

        with pytest.raises(ComparisonError, match="No face could be found") as exc_info:
            await RekognitionService(settings, session=session).compare_faces("selfie.jpg", "gallery.jpg")

        assert exc_info.value.details["error_code"] == "InvalidParameterException"
        assert exc_info.value.details["source_key"] == "selfie.jpg"

    async def test_other_client_error(self, settings, session):
        session.errors["compare_faces"] = ClientError(
            {"Error": {"Code": "ThrottlingException", "Message": "Rate exceeded"}},
            "CompareFaces",
        )

        with pytest.raises(ComparisonError, match="Failed to compare faces"):
            await RekognitionService(settings, session=session).compare_faces("selfie.jpg", "gallery.jpg")

    async def test_network_failure(self, settings, session):
        session.errors["compare_faces"] = ConnectionError("connection reset")

        with pytest.raises(ComparisonError, match="connection reset"):
            await RekognitionService(settings, session=session).compare_faces("selfie.jpg", "gallery.jpg")
