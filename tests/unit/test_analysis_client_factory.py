from unittest.mock import MagicMock

import pytest

from impact_analyzer.analysis.example_client_adapter import ExampleAnalysisClient
from impact_analyzer.analysis.factory import AnalysisClientFactory
from impact_analyzer.analysis.http_client_adapter import HttpAnalysisClient


def _make_settings(provider: str) -> MagicMock:
    return MagicMock(
        analysis_provider=provider,
        analysis_base_url="http://analysis.test",
        analysis_endpoint_path="/api/ai",
        analysis_timeout_seconds=None,
    )


class TestAnalysisClientFactory:
    def test_creates_http_client(self) -> None:
        client = AnalysisClientFactory.create(_make_settings("http"))
        assert isinstance(client, HttpAnalysisClient)

    def test_creates_example_client(self) -> None:
        client = AnalysisClientFactory.create(_make_settings("example"))
        assert isinstance(client, ExampleAnalysisClient)

    def test_is_case_insensitive(self) -> None:
        client = AnalysisClientFactory.create(_make_settings("HTTP"))
        assert isinstance(client, HttpAnalysisClient)

    def test_raises_for_unknown_provider(self) -> None:
        with pytest.raises(ValueError, match="Unknown analysis provider"):
            AnalysisClientFactory.create(_make_settings("carrier-pigeon"))
