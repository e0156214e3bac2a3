"""Upload-and-compare workflow behind the face comparison screen."""
from typing import Callable, Dict, Optional

from facecompare.core.config import Settings
from facecompare.core.exceptions import (
    AcquisitionCancelledError,
    AcquisitionEmptyError,
    ComparisonError,
    FaceCompareError,
    MediaAccessError,
    MissingInputsError,
    UploadError,
)
from facecompare.core.logging import get_logger
from facecompare.domain.entities.image import LocalImageHandle
from facecompare.domain.entities.workflow import WorkflowState
from facecompare.domain.interfaces import FaceComparisonService, MediaSource, ObjectStore
from facecompare.domain.value_objects.media import PickerOptions
from facecompare.domain.value_objects.recognition import ComparisonResult
from facecompare.domain.value_objects.workflow import (
    ImageSlot,
    Notification,
    NotificationLevel,
    WorkflowPhase,
)
from facecompare.services.file_service import FileService

logger = get_logger(__name__)

Notifier = Callable[[Notification], None]

CANCEL_NOTICES = {
    ImageSlot.SELFIE: ("Selfie Canceled", "You canceled the selfie capture."),
    ImageSlot.GALLERY: ("Image Picking Canceled", "You canceled picking an image."),
}
ACQUIRE_ACTIONS = {
    ImageSlot.SELFIE: "take a selfie",
    ImageSlot.GALLERY: "pick an image from the gallery",
}


def log_notification(notification: Notification) -> None:
    logger.info("User notification", title=notification.title, message=notification.message)


class FaceCompareWorkflow:
    """Sequences image acquisition, upload and face comparison for one screen.

    Every failure is caught where it happens, logged and turned into a single
    Notification; nothing is retried and nothing is raised to the caller.
    The state machine is::

        idle -> acquiring -> uploading -> idle -> comparing -> match | no_match

    with errors returning to idle.

    Example:
        ```python
        workflow = FaceCompareWorkflow(
            media_source, s3_service, rekognition_service, FileService(), settings
        )
        await workflow.take_selfie()
        await workflow.pick_image()
        result = await workflow.compare_faces()
        ```
    """

    def __init__(
        self,
        media_source: MediaSource,
        object_store: ObjectStore,
        face_comparison: FaceComparisonService,
        file_service: FileService,
        settings: Settings,
        notifier: Optional[Notifier] = None,
        state: Optional[WorkflowState] = None,
    ) -> None:
        """Initialize the workflow.

        Args:
            media_source: Camera and library access
            object_store: Where uploaded images are written
            face_comparison: Service comparing the two stored images
            file_service: Reads the bytes behind local handles
            settings: Settings providing object keys, content type and threshold
            notifier: Receives user-facing notifications (logged only by default)
            state: Existing state to continue from, e.g. from a UI session
        """
        self.media_source = media_source
        self.object_store = object_store
        self.face_comparison = face_comparison
        self.file_service = file_service
        self.notifier = notifier or log_notification
        self.state = state if state is not None else WorkflowState()
        self.keys: Dict[ImageSlot, str] = {
            ImageSlot.SELFIE: settings.SELFIE_KEY,
            ImageSlot.GALLERY: settings.GALLERY_KEY,
        }
        self.content_type = settings.UPLOAD_CONTENT_TYPE
        self.similarity_threshold = settings.SIMILARITY_THRESHOLD
        self.picker_options = PickerOptions()

    def _notify(
        self,
        title: str,
        message: str,
        level: NotificationLevel = NotificationLevel.INFO,
        error: Optional[FaceCompareError] = None,
    ) -> None:
        self.notifier(Notification(
            title=title,
            message=message,
            level=level,
            error_type=type(error).__name__ if error is not None else None,
        ))

    async def request_permissions(self) -> bool:
        """Ask the media source for access, warning the user if it is refused."""
        try:
            granted = await self.media_source.request_permissions()
        except MediaAccessError as e:
            logger.warning("Permission request failed", error=str(e))
            granted = False

        if not granted:
            self._notify(
                "Permission required",
                "We need permission to access your media library to pick an image.",
                NotificationLevel.WARNING,
            )
        return granted

    async def take_selfie(self) -> Optional[LocalImageHandle]:
        return await self.acquire(ImageSlot.SELFIE)

    async def pick_image(self) -> Optional[LocalImageHandle]:
        return await self.acquire(ImageSlot.GALLERY)

    async def acquire(self, slot: ImageSlot) -> Optional[LocalImageHandle]:
        """Acquire an image for ``slot`` and upload it.

        On cancellation or any acquisition error the state is left as it was.

        Args:
            slot: Which image to acquire

        Returns:
            The new handle, or None if nothing was acquired
        """
        previous_phase = self.state.phase
        self.state.phase = WorkflowPhase.ACQUIRING
        try:
            handle = await self._acquire_handle(slot)
        except AcquisitionCancelledError:
            logger.info("Image acquisition canceled", slot=slot.value)
            self.state.phase = previous_phase
            title, message = CANCEL_NOTICES[slot]
            self._notify(title, message)
            return None
        except MediaAccessError as e:
            logger.error("Image acquisition failed", slot=slot.value, error=e.message, details=e.details)
            self.state.phase = previous_phase
            self._notify("Error", e.message, NotificationLevel.ERROR, e)
            return None

        logger.info("Image acquired", slot=slot.value, uri=handle.uri)
        self.state.handles[slot] = handle
        self.state.uploaded[slot] = False
        self.state.comparison_result = ComparisonResult.UNKNOWN
        self.state.best_similarity = None

        await self.upload(slot, handle)
        return handle

    async def _acquire_handle(self, slot: ImageSlot) -> LocalImageHandle:
        if slot is ImageSlot.SELFIE:
            picker = self.media_source.capture_from_camera
        else:
            picker = self.media_source.pick_from_library

        try:
            result = await picker(self.picker_options)
        except MediaAccessError:
            raise
        except Exception as e:
            raise MediaAccessError(
                f"Failed to {ACQUIRE_ACTIONS[slot]}: {e}", details={"slot": slot.value}
            ) from e

        if result.canceled:
            raise AcquisitionCancelledError(
                f"{slot.value} acquisition canceled", details={"slot": slot.value}
            )
        if not result.assets:
            raise AcquisitionEmptyError("No image asset found.", details={"slot": slot.value})

        asset = result.assets[0]
        if not asset.uri and asset.data is None:
            raise AcquisitionEmptyError(
                f"Failed to get the {slot.value} image URI.", details={"slot": slot.value}
            )

        return LocalImageHandle(
            uri=asset.uri or f"memory://{slot.value}",
            data=asset.data,
            file_name=asset.file_name,
            mime_type=asset.mime_type,
            width=asset.width,
            height=asset.height,
        )

    async def upload(self, slot: ImageSlot, handle: LocalImageHandle) -> bool:
        """Upload ``handle`` under the fixed key of ``slot``.

        A single attempt is made. The slot is only marked uploaded if
        ``handle`` is still its current handle when the upload finishes.

        Args:
            slot: Slot whose key is written
            handle: Image to upload

        Returns:
            True if the object store accepted the image
        """
        key = self.keys[slot]
        self.state.phase = WorkflowPhase.UPLOADING
        self.state.status_message = f"Uploading {key}..."
        try:
            body = await self.file_service.get_handle_bytes(handle)
            await self.object_store.put(key, body, self.content_type)
        except UploadError as e:
            logger.error("Error uploading image", slot=slot.value, key=key, error=e.message, details=e.details)
            # A newer handle owns the slot and its results now
            if self.state.handles.get(slot) is handle:
                self.state.uploaded[slot] = False
                self.state.comparison_result = ComparisonResult.UNKNOWN
                self.state.best_similarity = None
            self._notify(
                "Upload Error",
                f"Failed to upload {slot.value} image: {e.message}",
                NotificationLevel.ERROR,
                e,
            )
            return False
        finally:
            self.state.status_message = None
            if self.state.handles.get(slot) is handle:
                self.state.phase = WorkflowPhase.IDLE

        if self.state.handles.get(slot) is handle:
            self.state.uploaded[slot] = True
        else:
            logger.info("Uploaded image was replaced before upload finished", slot=slot.value, key=key)
        logger.info("Image uploaded", slot=slot.value, key=key)
        return True

    def _handles_changed(self, snapshot: Dict[ImageSlot, LocalImageHandle]) -> bool:
        return any(self.state.handles.get(slot) is not snapshot.get(slot) for slot in ImageSlot)

    async def compare_faces(self) -> ComparisonResult:
        """Compare the uploaded selfie with the uploaded gallery image.

        A result that arrives after either image was re-acquired is
        discarded, since it no longer describes the images on screen.

        Returns:
            The comparison result now held in state
        """
        if not self.state.ready_to_compare:
            missing = [
                slot.value for slot in ImageSlot
                if slot not in self.state.handles or not self.state.uploaded.get(slot, False)
            ]
            error = MissingInputsError(
                "Please take a selfie and pick an image from the gallery.",
                details={"missing": missing},
            )
            logger.warning("Comparison requested without both images", missing=missing)
            self._notify("Missing Images", error.message, NotificationLevel.WARNING, error)
            return self.state.comparison_result

        compared_handles = dict(self.state.handles)
        self.state.phase = WorkflowPhase.COMPARING
        self.state.status_message = "Comparing faces..."
        try:
            comparison = await self.face_comparison.compare_faces(
                self.keys[ImageSlot.SELFIE],
                self.keys[ImageSlot.GALLERY],
                self.similarity_threshold,
            )
        except ComparisonError as e:
            logger.error("Error comparing faces", error=e.message, details=e.details)
            if not self._handles_changed(compared_handles):
                self.state.comparison_result = ComparisonResult.UNKNOWN
                self.state.best_similarity = None
                self.state.phase = WorkflowPhase.IDLE
            self._notify(
                "Comparison Error",
                f"Failed to compare faces: {e.message}",
                NotificationLevel.ERROR,
                e,
            )
            return self.state.comparison_result
        finally:
            self.state.status_message = None

        if self._handles_changed(compared_handles):
            logger.info(
                "Images were replaced during comparison, discarding result",
                is_match=comparison.is_match,
                best_similarity=comparison.best_similarity,
            )
            return self.state.comparison_result

        if comparison.is_match:
            self.state.comparison_result = ComparisonResult.MATCH
            self.state.phase = WorkflowPhase.MATCH
        else:
            self.state.comparison_result = ComparisonResult.NO_MATCH
            self.state.phase = WorkflowPhase.NO_MATCH
        self.state.best_similarity = comparison.best_similarity

        logger.info(
            "Faces compared",
            result=self.state.comparison_result.value,
            best_similarity=comparison.best_similarity,
        )
        return self.state.comparison_result
