"""Media source backed by Streamlit's camera and file upload widgets."""
from typing import Any, Optional

from facecompare.domain.interfaces import MediaSource
from facecompare.domain.value_objects.media import ImageAsset, PickerOptions, PickerResult


def asset_from_upload(uploaded_file: Any) -> ImageAsset:
    """Convert a Streamlit UploadedFile into an ImageAsset.

    Args:
        uploaded_file: Value returned by ``st.camera_input`` or ``st.file_uploader``

    Returns:
        ImageAsset carrying the uploaded bytes inline
    """
    return ImageAsset(
        uri=f"streamlit://{uploaded_file.file_id}",
        data=uploaded_file.getvalue(),
        file_name=uploaded_file.name,
        mime_type=uploaded_file.type,
    )


class StreamlitMediaSource(MediaSource):
    """Hands the current widget values to the workflow.

    Streamlit widgets have already been filled in by the time the script
    runs, so "opening" the camera or library just reads the value the page
    set. An empty widget means the user dismissed or cleared it.
    The browser asks for camera access itself, so permission is always granted here.
    """

    def __init__(self, camera_file: Optional[Any] = None, library_file: Optional[Any] = None):
        self.camera_file = camera_file
        self.library_file = library_file

    @staticmethod
    def _result(uploaded_file: Optional[Any]) -> PickerResult:
        if uploaded_file is None:
            return PickerResult(canceled=True)
        return PickerResult(assets=[asset_from_upload(uploaded_file)])

    async def request_permissions(self) -> bool:
        return True

    async def capture_from_camera(self, options: PickerOptions) -> PickerResult:
        return self._result(self.camera_file)

    async def pick_from_library(self, options: PickerOptions) -> PickerResult:
        return self._result(self.library_file)
