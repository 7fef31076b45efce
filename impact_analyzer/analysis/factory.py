from typing import ClassVar

from impact_analyzer.analysis.client_base import BaseAnalysisClient
from impact_analyzer.analysis.example_client_adapter import ExampleAnalysisClient
from impact_analyzer.analysis.http_client_adapter import HttpAnalysisClient
from impact_analyzer.config.settings import Settings


class AnalysisClientFactory:
    """Creates the configured analysis client adapter."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("example", "http")

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalysisClient:
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return ExampleAnalysisClient()
        if provider == "http":
            return HttpAnalysisClient(
                base_url=settings.analysis_base_url,
                endpoint_path=settings.analysis_endpoint_path,
                timeout_seconds=settings.analysis_timeout_seconds,
            )
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
