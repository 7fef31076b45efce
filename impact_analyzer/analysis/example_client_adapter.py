"""Example analysis client adapter.

Returns a canned report without touching the network. Useful for local
development of the page and as a template for new adapters.
"""

from typing import ClassVar

from impact_analyzer.analysis.client_base import BaseAnalysisClient
from impact_analyzer.analysis.models import AnalysisRequest


class ExampleAnalysisClient(BaseAnalysisClient):
    """Example adapter that returns a fixed markdown report."""

    DEFAULT_REPORT: ClassVar[str] = (
        "## Impact Summary\n\n"
        "No significant impact detected.\n\n"
        "- **Scene:** no visible flooding or structural damage\n"
        "- **Report:** storm track stays offshore\n"
    )

    async def analyze(self, request: AnalysisRequest) -> str:
        _ = request
        return self.DEFAULT_REPORT
