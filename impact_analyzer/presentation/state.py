"""View state derived from the file slots and the submission orchestrator."""

from dataclasses import dataclass
from enum import Enum

from impact_analyzer.acquisition.models import FileRole
from impact_analyzer.acquisition.slot import FileSlot
from impact_analyzer.presentation.markdown_renderer import render_report
from impact_analyzer.submission.models import SubmissionState
from impact_analyzer.submission.orchestrator import SubmissionOrchestrator

SUBMIT_LABEL = "Analyze Impact"
SUBMITTING_LABEL = "Analyzing..."
REPORT_HEADING = "Analysis Report"


class ViewPhase(str, Enum):
    EMPTY = "empty"
    PARTIALLY_SELECTED = "partially_selected"
    READY_TO_SUBMIT = "ready_to_submit"
    SUBMITTING = "submitting"
    COMPLETE = "complete"
    FAILED = "failed"


_RESULT_PHASES = frozenset({ViewPhase.COMPLETE, ViewPhase.FAILED})


@dataclass(frozen=True)
class SlotCopy:
    """User-facing text for one drop target."""

    prompt: str
    drop_hint: str
    selected_prefix: str


SLOT_COPY: dict[FileRole, SlotCopy] = {
    FileRole.IMAGE: SlotCopy(
        prompt="Drag & Drop a CCTV Image here or click to browse",
        drop_hint="Drop the Image ...",
        selected_prefix="Image selected",
    ),
    FileRole.DOCUMENT: SlotCopy(
        prompt="Drag & Drop the Typhoon Report here or click to browse",
        drop_hint="Drop the PDF ...",
        selected_prefix="PDF selected",
    ),
}


@dataclass(frozen=True)
class SlotView:
    role: FileRole
    prompt: str
    caption: str | None
    drop_hint: str | None
    is_active: bool


@dataclass(frozen=True)
class ViewState:
    phase: ViewPhase
    submit_enabled: bool
    submit_label: str
    image: SlotView
    document: SlotView
    report_html: str | None


def derive_slot_view(slot: FileSlot) -> SlotView:
    copy = SLOT_COPY[slot.role]
    selected = slot.selected
    return SlotView(
        role=slot.role,
        prompt=copy.prompt,
        caption=f"{copy.selected_prefix}: {selected.name}" if selected is not None else None,
        drop_hint=copy.drop_hint if slot.is_active and selected is None else None,
        is_active=slot.is_active,
    )


def derive_phase(orchestrator: SubmissionOrchestrator) -> ViewPhase:
    if orchestrator.state is SubmissionState.SUBMITTING:
        return ViewPhase.SUBMITTING
    filled = sum(
        slot.is_filled for slot in (orchestrator.image_slot, orchestrator.document_slot)
    )
    if filled == 0:
        return ViewPhase.EMPTY
    if filled == 1:
        return ViewPhase.PARTIALLY_SELECTED
    outcome = orchestrator.outcome
    if outcome is not None:
        return ViewPhase.COMPLETE if outcome.succeeded else ViewPhase.FAILED
    return ViewPhase.READY_TO_SUBMIT


def derive_view(orchestrator: SubmissionOrchestrator) -> ViewState:
    """Snapshot everything the page needs to render.

    The submit trigger follows the orchestrator's readiness, so a finished
    submission can be retried as long as both files are still selected.
    """
    phase = derive_phase(orchestrator)
    result = orchestrator.result if phase in _RESULT_PHASES else None
    return ViewState(
        phase=phase,
        submit_enabled=orchestrator.is_ready,
        submit_label=SUBMITTING_LABEL if phase is ViewPhase.SUBMITTING else SUBMIT_LABEL,
        image=derive_slot_view(orchestrator.image_slot),
        document=derive_slot_view(orchestrator.document_slot),
        report_html=render_report(result) if result else None,
    )
