"""Service container for dependency injection."""
from typing import Optional

import aioboto3

from facecompare.core.config import Settings
from facecompare.domain.entities.workflow import WorkflowState
from facecompare.domain.interfaces import FaceComparisonService, MediaSource, ObjectStore
from facecompare.services.aws.rekognition import RekognitionService
from facecompare.services.aws.s3 import S3Service
from facecompare.services.face_compare import FaceCompareWorkflow, Notifier
from facecompare.services.file_service import FileService


class ServiceContainer:
    """Container for application services.

    Builds every client from one explicitly passed Settings object, so no
    service reads configuration from module state.

    Example:
        ```python
        container = ServiceContainer(get_settings())
        workflow = container.create_workflow(media_source, notifier=show_message)
        await workflow.take_selfie()
        ```
    """

    def __init__(self, settings: Settings, session: Optional[aioboto3.Session] = None) -> None:
        """Create the clients.

        Args:
            settings: Application settings
            session: aioboto3 session shared by the AWS clients
        """
        self.settings = settings
        self.session = session or aioboto3.Session()
        self.object_store: ObjectStore = S3Service(settings, session=self.session)
        self.face_comparison: FaceComparisonService = RekognitionService(settings, session=self.session)
        self.file_service = FileService(timeout=settings.HANDLE_FETCH_TIMEOUT)

    def create_workflow(
        self,
        media_source: MediaSource,
        notifier: Optional[Notifier] = None,
        state: Optional[WorkflowState] = None,
    ) -> FaceCompareWorkflow:
        """Build a workflow for one screen session."""
        return FaceCompareWorkflow(
            media_source=media_source,
            object_store=self.object_store,
            face_comparison=self.face_comparison,
            file_service=self.file_service,
            settings=self.settings,
            notifier=notifier,
            state=state,
        )
