class SubmissionError(Exception):
    """Base exception for all submission-related errors."""


class SubmissionRejectedError(SubmissionError):
    """Raised synchronously when a submission cannot start; nothing is sent."""


class MissingFilesError(SubmissionRejectedError):
    """Raised when either the image or the document slot is empty."""


class SubmissionInProgressError(SubmissionRejectedError):
    """Raised when a submission is requested while another is in flight."""
