class AnalysisError(Exception):
    """Raised when the analysis service call fails."""


class AnalysisTransportError(AnalysisError):
    """Raised when the service is unreachable, times out, or answers with a non-success status."""


class AnalysisProtocolError(AnalysisError):
    """Raised when the response body does not carry the expected result field."""
