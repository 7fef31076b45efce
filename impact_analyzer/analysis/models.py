from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisRequest:
    """Encoded payloads for one submission, tagged by role."""

    image: str
    document: str

    def to_payload(self) -> dict[str, str]:
        """JSON body as the analysis endpoint expects it."""
        return {"img": self.image, "pdf": self.document}
