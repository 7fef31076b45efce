"""Streamlit page: two file pickers, a submit button and the analysis report."""

import asyncio

import streamlit as st

from impact_analyzer.acquisition.models import SelectedFile
from impact_analyzer.acquisition.slot import FileSlot
from impact_analyzer.config.settings import Settings
from impact_analyzer.logging.logger import Log
from impact_analyzer.presentation.preview import document_preview_png, image_preview_bytes
from impact_analyzer.presentation.state import REPORT_HEADING, SlotView, derive_view
from impact_analyzer.submission.exceptions import SubmissionRejectedError
from impact_analyzer.submission.orchestrator import SubmissionOrchestrator, build_orchestrator

_ORCHESTRATOR_KEY = "impact_analyzer.orchestrator"


def _get_orchestrator(settings: Settings) -> SubmissionOrchestrator:
    if _ORCHESTRATOR_KEY not in st.session_state:
        st.session_state[_ORCHESTRATOR_KEY] = build_orchestrator(settings)
    return st.session_state[_ORCHESTRATOR_KEY]


def _sync_slot(slot: FileSlot, view: SlotView) -> None:
    """Mirror the uploader widget into the slot; only new uploads replace the selection."""
    key = f"upload_{slot.role.value}"
    uploaded = st.file_uploader(view.prompt, type=list(slot.accept.extensions), key=key)
    seen_key = f"{key}_file_id"
    if uploaded is None:
        if slot.is_filled:
            slot.clear()
        st.session_state.pop(seen_key, None)
        return
    if st.session_state.get(seen_key) == uploaded.file_id:
        return
    st.session_state[seen_key] = uploaded.file_id
    slot.offer([SelectedFile.from_bytes(uploaded.name, uploaded.type, uploaded.getvalue())])


def _render_previews(orchestrator: SubmissionOrchestrator, zoom: float) -> None:
    image = orchestrator.image_slot.selected
    document = orchestrator.document_slot.selected
    if image is None and document is None:
        return
    st.divider()
    if image is not None:
        data = image_preview_bytes(image)
        if data is not None:
            st.image(data, caption="CCTV Image Preview", width="stretch")
    if document is not None:
        st.markdown(f"**Selected PDF:** {document.name}")
        png = document_preview_png(document, zoom=zoom)
        if png is not None:
            st.image(png, caption="Report page 1", width="stretch")


def render_page(settings: Settings) -> None:
    st.set_page_config(page_title="Typhoon Impact Analysis", layout="wide")
    st.title("Typhoon Impact Analysis")
    st.caption("Upload a CCTV image and the typhoon report, then click **Analyze Impact**.")

    orchestrator = _get_orchestrator(settings)
    view = derive_view(orchestrator)

    col_image, col_document = st.columns(2, gap="large")
    with col_image:
        _sync_slot(orchestrator.image_slot, view.image)
    with col_document:
        _sync_slot(orchestrator.document_slot, view.document)

    view = derive_view(orchestrator)
    for slot_view in (view.image, view.document):
        if slot_view.caption:
            st.caption(slot_view.caption)

    _render_previews(orchestrator, settings.preview_zoom)

    if st.button(view.submit_label, type="primary", disabled=not view.submit_enabled):
        with st.spinner("Analyzing..."):
            try:
                asyncio.run(orchestrator.submit())
            except SubmissionRejectedError as exc:
                Log.warning(f"Submission rejected: {exc}")
                st.warning(str(exc))
        view = derive_view(orchestrator)

    if view.report_html is not None:
        st.divider()
        st.subheader(REPORT_HEADING)
        st.markdown(view.report_html, unsafe_allow_html=True)
        if orchestrator.outcome is not None and orchestrator.outcome.succeeded:
            st.download_button(
                "Download report.md",
                data=orchestrator.result or "",
                file_name="analysis_report.md",
                mime="text/markdown",
            )
