import asyncio
from collections.abc import Callable, Generator
from contextlib import contextmanager

from impact_analyzer.acquisition.media_filter import DOCUMENT_FILTER, IMAGE_FILTER
from impact_analyzer.acquisition.models import FileRole, SelectedFile
from impact_analyzer.acquisition.slot import FileSlot
from impact_analyzer.analysis.client_base import BaseAnalysisClient
from impact_analyzer.analysis.exceptions import AnalysisProtocolError, AnalysisTransportError
from impact_analyzer.analysis.factory import AnalysisClientFactory
from impact_analyzer.analysis.models import AnalysisRequest
from impact_analyzer.config.settings import Settings
from impact_analyzer.encoding.encoder import encode_file
from impact_analyzer.encoding.exceptions import FileReadError
from impact_analyzer.logging.logger import Log
from impact_analyzer.submission.exceptions import MissingFilesError, SubmissionInProgressError
from impact_analyzer.submission.models import FailureKind, SubmissionOutcome, SubmissionState

DEFAULT_FAILURE_MESSAGE = "An error occurred during analysis. Please try again."
MISSING_FILES_MESSAGE = "Both a scene image and a report document are required."

StateListener = Callable[["SubmissionOrchestrator"], None]


class SubmissionOrchestrator:
    """Runs one image + document submission against the analysis service.

    Pipeline: check readiness -> encode both files -> post -> map outcome.
    The state always returns to idle once a submission settles.
    """

    def __init__(
        self,
        image_slot: FileSlot,
        document_slot: FileSlot,
        client: BaseAnalysisClient,
        failure_message: str = DEFAULT_FAILURE_MESSAGE,
    ) -> None:
        self._image_slot = image_slot
        self._document_slot = document_slot
        self._client = client
        self._failure_message = failure_message
        self._state = SubmissionState.IDLE
        self._outcome: SubmissionOutcome | None = None
        self._listeners: list[StateListener] = []

    @property
    def image_slot(self) -> FileSlot:
        return self._image_slot

    @property
    def document_slot(self) -> FileSlot:
        return self._document_slot

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def outcome(self) -> SubmissionOutcome | None:
        return self._outcome

    @property
    def result(self) -> str | None:
        """Report text or failure placeholder of the last settled submission."""
        return self._outcome.text if self._outcome is not None else None

    @property
    def is_ready(self) -> bool:
        return (
            self._image_slot.is_filled
            and self._document_slot.is_filled
            and self._state is SubmissionState.IDLE
        )

    def subscribe(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    async def submit(self) -> SubmissionOutcome:
        """Submit the selected files and settle on a report or the failure placeholder.

        Raises:
            MissingFilesError: if either slot is empty.
            SubmissionInProgressError: if a submission is already in flight.
        """
        image, document = self._require_files()
        if self._state is SubmissionState.SUBMITTING:
            raise SubmissionInProgressError("A submission is already in progress.")

        with self._submitting():
            outcome = await self._run(image, document)
            self._outcome = outcome
        return outcome

    def _require_files(self) -> tuple[SelectedFile, SelectedFile]:
        image = self._image_slot.selected
        document = self._document_slot.selected
        if image is None or document is None:
            raise MissingFilesError(MISSING_FILES_MESSAGE)
        return image, document

    @contextmanager
    def _submitting(self) -> Generator[None, None, None]:
        self._state = SubmissionState.SUBMITTING
        self._outcome = None
        self._notify()
        try:
            yield
        finally:
            self._state = SubmissionState.IDLE
            self._notify()

    async def _run(self, image: SelectedFile, document: SelectedFile) -> SubmissionOutcome:
        Log.info(f"Submitting image '{image.name}' and document '{document.name}'")
        try:
            encoded = await self._encode_all({FileRole.IMAGE: image, FileRole.DOCUMENT: document})
            request = AnalysisRequest(
                image=encoded[FileRole.IMAGE],
                document=encoded[FileRole.DOCUMENT],
            )
            text = await self._client.analyze(request)
        except FileReadError as exc:
            return self._fail(FailureKind.IO, exc)
        except AnalysisTransportError as exc:
            return self._fail(FailureKind.TRANSPORT, exc)
        except AnalysisProtocolError as exc:
            return self._fail(FailureKind.PROTOCOL, exc)
        except Exception as exc:
            return self._fail(FailureKind.UNEXPECTED, exc)

        Log.info(f"Analysis complete: {len(text)} chars")
        return SubmissionOutcome.success(text)

    @staticmethod
    async def _encode_all(files: dict[FileRole, SelectedFile]) -> dict[FileRole, str]:
        """Encode every file concurrently; nothing is returned until all have settled."""
        roles = list(files)
        results = await asyncio.gather(
            *(encode_file(files[role]) for role in roles),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return dict(zip(roles, results))

    def _fail(self, kind: FailureKind, exc: BaseException) -> SubmissionOutcome:
        Log.error(f"Analysis failed ({kind.value}): {exc}")
        return SubmissionOutcome.failed(kind, self._failure_message)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)


def build_orchestrator(
    settings: Settings,
    client: BaseAnalysisClient | None = None,
) -> SubmissionOrchestrator:
    """Build an orchestrator with both file slots and the configured client."""
    return SubmissionOrchestrator(
        image_slot=FileSlot(FileRole.IMAGE, IMAGE_FILTER),
        document_slot=FileSlot(FileRole.DOCUMENT, DOCUMENT_FILTER),
        client=client if client is not None else AnalysisClientFactory.create(settings),
        failure_message=settings.failure_message,
    )
