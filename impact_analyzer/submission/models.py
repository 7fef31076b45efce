from dataclasses import dataclass
from enum import Enum


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


class FailureKind(str, Enum):
    IO = "io"
    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class SubmissionOutcome:
    """Settled result of one submission: the report text or the failure placeholder."""

    text: str
    failure: FailureKind | None = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, text: str) -> "SubmissionOutcome":
        return cls(text=text)

    @classmethod
    def failed(cls, kind: FailureKind, placeholder: str) -> "SubmissionOutcome":
        return cls(text=placeholder, failure=kind)
