from abc import ABC, abstractmethod

from impact_analyzer.analysis.models import AnalysisRequest


class BaseAnalysisClient(ABC):
    """Contract for analysis service clients."""

    @abstractmethod
    async def analyze(self, request: AnalysisRequest) -> str:
        """Send both encoded files and return the narrative result text.

        Raises:
            AnalysisTransportError: on network failures and non-success statuses.
            AnalysisProtocolError: on a malformed response body.
        """
