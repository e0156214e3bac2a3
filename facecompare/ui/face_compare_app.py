#!/usr/bin/env python
"""
Face Compare Streamlit App

Checks whether a selfie and a gallery photo show the same person by:
1. Taking a selfie with the camera
2. Picking an image from the gallery
3. Uploading both to S3 under fixed keys
4. Comparing them with AWS Rekognition

Usage:
    streamlit run facecompare/ui/face_compare_app.py
"""
import asyncio
from typing import Any, Dict, List, Optional

import streamlit as st

from facecompare.core.config import get_settings
from facecompare.core.container import ServiceContainer
from facecompare.core.logging import get_logger, setup_logging
from facecompare.domain.entities.image import LocalImageHandle
from facecompare.domain.entities.workflow import WorkflowState
from facecompare.domain.value_objects.recognition import ComparisonResult
from facecompare.domain.value_objects.workflow import ImageSlot, Notification, NotificationLevel
from facecompare.services.face_compare import FaceCompareWorkflow
from facecompare.ui.media_source import StreamlitMediaSource

logger = get_logger(__name__)


@st.cache_resource
def get_container() -> ServiceContainer:
    """Get the service container, built once per server process."""
    settings = get_settings()
    setup_logging(settings)
    logger.info(
        "Starting face compare app",
        project=settings.PROJECT_NAME,
        version=settings.VERSION,
        environment=settings.ENVIRONMENT,
    )
    return ServiceContainer(settings)


def widget_changed(processed: Dict[ImageSlot, Optional[str]], slot: ImageSlot, uploaded_file: Optional[Any]) -> bool:
    """Return True the first time a widget value is seen, including being cleared.

    Args:
        processed: File id last handled per slot, kept in session state
        slot: Slot the widget feeds
        uploaded_file: Current widget value, None when empty
    """
    current_id = uploaded_file.file_id if uploaded_file is not None else None
    if processed.get(slot) == current_id:
        return False
    processed[slot] = current_id
    return True


async def acquire_from_widget(
    workflow: FaceCompareWorkflow,
    media_source: StreamlitMediaSource,
    slot: ImageSlot,
    uploaded_file: Optional[Any],
) -> Optional[LocalImageHandle]:
    """Run the acquisition for a changed widget value. An empty value is a cancellation."""
    if slot is ImageSlot.SELFIE:
        media_source.camera_file = uploaded_file
        return await workflow.take_selfie()
    media_source.library_file = uploaded_file
    return await workflow.pick_image()


def show_preview(handle: Optional[LocalImageHandle], caption: str) -> None:
    if handle is None:
        return
    source = handle.data if handle.data is not None else handle.uri
    st.image(source, caption=caption, width=200)


def show_notifications(notifications: List[Notification]) -> None:
    for notification in notifications:
        text = f"**{notification.title}**: {notification.message}"
        if notification.level is NotificationLevel.ERROR:
            st.error(text)
        elif notification.level is NotificationLevel.WARNING:
            st.warning(text)
        else:
            st.info(text)


# Main app
def main():
    container = get_container()
    settings = container.settings

    st.set_page_config(
        page_title=settings.PROJECT_NAME,
        page_icon="🙂",
        layout="centered"
    )

    if 'workflow_state' not in st.session_state:
        st.session_state.workflow_state = WorkflowState()
    if 'processed_files' not in st.session_state:
        st.session_state.processed_files = {}
    if 'permissions_checked' not in st.session_state:
        st.session_state.permissions_checked = False

    notifications: List[Notification] = []
    media_source = StreamlitMediaSource()
    workflow = container.create_workflow(
        media_source,
        notifier=notifications.append,
        state=st.session_state.workflow_state,
    )
    state = workflow.state

    st.title(settings.PROJECT_NAME)
    st.write("Take a selfie, pick a photo from your gallery, then compare the faces.")

    if not st.session_state.permissions_checked:
        asyncio.run(workflow.request_permissions())
        st.session_state.permissions_checked = True

    col1, col2 = st.columns(2)

    with col1:
        st.header("Selfie")
        camera_file = st.camera_input("Take Selfie")
        if widget_changed(st.session_state.processed_files, ImageSlot.SELFIE, camera_file):
            with st.spinner(f"Uploading {settings.SELFIE_KEY}..."):
                asyncio.run(acquire_from_widget(workflow, media_source, ImageSlot.SELFIE, camera_file))
        show_preview(state.selfie, "Selfie")

    with col2:
        st.header("Gallery")
        library_file = st.file_uploader("Pick Image from Gallery", type=["jpg", "jpeg", "png"])
        if widget_changed(st.session_state.processed_files, ImageSlot.GALLERY, library_file):
            with st.spinner(f"Uploading {settings.GALLERY_KEY}..."):
                asyncio.run(acquire_from_widget(workflow, media_source, ImageSlot.GALLERY, library_file))
        show_preview(state.gallery, "Gallery image")

    if st.button("Compare Faces"):
        with st.spinner("Comparing faces..."):
            asyncio.run(workflow.compare_faces())

    show_notifications(notifications)

    if state.result_message is not None:
        if state.comparison_result is ComparisonResult.MATCH:
            st.success(state.result_message)
        else:
            st.warning(state.result_message)
        if state.best_similarity is not None:
            st.caption(f"Best similarity: {state.best_similarity:.2f}%")


if __name__ == "__main__":
    main()
