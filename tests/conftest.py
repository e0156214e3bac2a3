"""Shared fixtures for the workflow tests."""
from typing import List

import pytest

from facecompare.core.config import Settings
from facecompare.domain.value_objects.workflow import Notification
from facecompare.services.face_compare import FaceCompareWorkflow
from facecompare.services.file_service import FileService
from tests.fakes import FakeFaceComparisonService, FakeMediaSource, FakeObjectStore


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        AWS_S3_BUCKET="test-bucket",
        AWS_REGION="us-east-1",
        AWS_ACCESS_KEY_ID="",
        AWS_SECRET_ACCESS_KEY="",
    )


@pytest.fixture
def media_source() -> FakeMediaSource:
    return FakeMediaSource()


@pytest.fixture
def object_store() -> FakeObjectStore:
    return FakeObjectStore()


@pytest.fixture
def face_comparison(object_store) -> FakeFaceComparisonService:
    return FakeFaceComparisonService(object_store)


@pytest.fixture
def notifications() -> List[Notification]:
    return []


@pytest.fixture
def workflow(media_source, object_store, face_comparison, settings, notifications) -> FaceCompareWorkflow:
    return FaceCompareWorkflow(
        media_source=media_source,
        object_store=object_store,
        face_comparison=face_comparison,
        file_service=FileService(),
        settings=settings,
        notifier=notifications.append,
    )
