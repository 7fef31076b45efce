import pytest
from pydantic import ValidationError

from impact_analyzer.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_analysis_provider(self) -> None:
        s = Settings()
        assert s.analysis_provider == "http"

    def test_default_endpoint_path(self) -> None:
        s = Settings()
        assert s.analysis_endpoint_path == "/api/ai"

    def test_no_timeout_by_default(self) -> None:
        s = Settings()
        assert s.analysis_timeout_seconds is None

    def test_default_failure_message(self) -> None:
        s = Settings()
        assert s.failure_message == "An error occurred during analysis. Please try again."


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_base_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_BASE_URL", "https://analysis.example.com")
        s = Settings()
        assert s.analysis_base_url == "https://analysis.example.com"

    def test_loads_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_TIMEOUT_SECONDS", "2.5")
        s = Settings()
        assert s.analysis_timeout_seconds == 2.5

    def test_loads_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_PROVIDER", "example")
        s = Settings()
        assert s.analysis_provider == "example"


class TestSettingsValidation:
    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANALYSIS_TIMEOUT_SECONDS", "soon")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_preview_zoom_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PREVIEW_ZOOM", "large")
        with pytest.raises(ValidationError):
            Settings()
