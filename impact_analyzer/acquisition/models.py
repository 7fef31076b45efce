import mimetypes
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

_FALLBACK_MEDIA_TYPE = "application/octet-stream"


class FileRole(str, Enum):
    """Which slot a file belongs to."""

    IMAGE = "image"
    DOCUMENT = "document"


@dataclass(frozen=True)
class SelectedFile:
    """A file picked by the user, read lazily at submission time."""

    name: str
    media_type: str
    reader: Callable[[], bytes] = field(repr=False, compare=False)

    def read_bytes(self) -> bytes:
        """Read the file content.

        Raises:
            OSError: if the underlying source cannot be read.
        """
        return self.reader()

    @classmethod
    def from_path(cls, path: Path, media_type: str | None = None) -> "SelectedFile":
        """Select a file on disk; the media type is guessed from its name if not given."""
        if media_type is None:
            guessed, _encoding = mimetypes.guess_type(path.name)
            media_type = guessed or _FALLBACK_MEDIA_TYPE
        return cls(name=path.name, media_type=media_type, reader=path.read_bytes)

    @classmethod
    def from_bytes(cls, name: str, media_type: str | None, data: bytes) -> "SelectedFile":
        """Wrap an in-memory upload."""
        return cls(
            name=name,
            media_type=media_type or _FALLBACK_MEDIA_TYPE,
            reader=lambda: data,
        )
