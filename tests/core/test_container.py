"""Tests for the service container."""
from facecompare.core.container import ServiceContainer
from facecompare.domain.entities.workflow import WorkflowState
from facecompare.services.aws.rekognition import RekognitionService
from facecompare.services.aws.s3 import S3Service
from tests.fakes import FakeMediaSource, FakeSession


def test_builds_clients_from_settings(settings):
    container = ServiceContainer(settings, session=FakeSession())

    assert isinstance(container.object_store, S3Service)
    assert isinstance(container.face_comparison, RekognitionService)
    assert container.object_store.bucket_name == "test-bucket"
    assert container.face_comparison.similarity_threshold == 90.0
    assert container.file_service.timeout == settings.HANDLE_FETCH_TIMEOUT


def test_create_workflow_reuses_session_state(settings):
    container = ServiceContainer(settings, session=FakeSession())
    state = WorkflowState()
    received = []

    workflow = container.create_workflow(FakeMediaSource(), notifier=received.append, state=state)

    assert workflow.state is state
    assert workflow.object_store is container.object_store
    assert workflow.keys == {"selfie": "selfie.jpg", "gallery": "gallery.jpg"}
