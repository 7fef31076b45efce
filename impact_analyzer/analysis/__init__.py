from impact_analyzer.analysis.client_base import BaseAnalysisClient
from impact_analyzer.analysis.factory import AnalysisClientFactory
from impact_analyzer.analysis.http_client_adapter import HttpAnalysisClient

__all__ = ["AnalysisClientFactory", "BaseAnalysisClient", "HttpAnalysisClient"]
