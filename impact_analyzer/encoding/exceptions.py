class EncodingError(Exception):
    """Base exception for all encoding-related errors."""


class FileReadError(EncodingError, OSError):
    """Raised when a selected file's bytes cannot be read."""
