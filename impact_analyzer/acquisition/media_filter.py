from dataclasses import dataclass


@dataclass(frozen=True)
class MediaTypeFilter:
    """Accepted media types for a picker, with ``type/*`` wildcard support.

    ``extensions`` are the file suffixes offered by the browse dialog.
    """

    patterns: tuple[str, ...]
    extensions: tuple[str, ...] = ()

    def accepts(self, media_type: str) -> bool:
        candidate = media_type.strip().lower()
        for pattern in self.patterns:
            pattern = pattern.lower()
            if pattern.endswith("/*"):
                if candidate.startswith(pattern[:-1]):
                    return True
            elif candidate == pattern:
                return True
        return False


IMAGE_FILTER = MediaTypeFilter(
    patterns=("image/*",),
    extensions=("png", "jpg", "jpeg", "gif", "webp", "bmp"),
)
DOCUMENT_FILTER = MediaTypeFilter(
    patterns=("application/pdf",),
    extensions=("pdf",),
)
