import httpx

from impact_analyzer.analysis.client_base import BaseAnalysisClient
from impact_analyzer.analysis.exceptions import AnalysisTransportError
from impact_analyzer.analysis.models import AnalysisRequest
from impact_analyzer.analysis.validator import extract_error_detail, parse_analysis_response
from impact_analyzer.logging.logger import Log


class HttpAnalysisClient(BaseAnalysisClient):
    """Posts the encoded files to the analysis endpoint over HTTP."""

    def __init__(
        self,
        *,
        base_url: str,
        endpoint_path: str,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._endpoint_path = endpoint_path
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def analyze(self, request: AnalysisRequest) -> str:
        async with self._open_client() as client:
            try:
                response = await client.post(self._endpoint_path, json=request.to_payload())
            except httpx.HTTPError as exc:
                raise AnalysisTransportError(
                    f"Analysis service network error: {exc!r}"
                ) from exc

        if not response.is_success:
            raise AnalysisTransportError(
                f"Analysis service returned HTTP {response.status_code}: "
                f"{extract_error_detail(response.text)}"
            )
        Log.debug(f"Analysis service responded with {len(response.content)} bytes")
        return parse_analysis_response(response.text)

    def _open_client(self) -> httpx.AsyncClient:
        # Without an explicit timeout the httpx default applies.
        if self._timeout_seconds is None:
            return httpx.AsyncClient(base_url=self._base_url, transport=self._transport)
        return httpx.AsyncClient(
            base_url=self._base_url,
            transport=self._transport,
            timeout=self._timeout_seconds,
        )
