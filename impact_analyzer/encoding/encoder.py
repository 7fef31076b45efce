"""Base64 encoding of selected files for the JSON request body."""

import asyncio
import base64

from impact_analyzer.acquisition.models import SelectedFile
from impact_analyzer.encoding.exceptions import FileReadError

_DATA_URL_SCHEME = "data:"


async def read_as_data_url(selected: SelectedFile) -> str:
    """Read the file off the event loop and return it as a base64 data URL.

    Raises:
        FileReadError: if the file can no longer be read.
    """
    try:
        raw = await asyncio.to_thread(selected.read_bytes)
    except OSError as exc:
        raise FileReadError(f"Could not read '{selected.name}': {exc}") from exc
    payload = base64.b64encode(raw).decode("ascii")
    return f"{_DATA_URL_SCHEME}{selected.media_type};base64,{payload}"


def strip_data_url_prefix(text: str) -> str:
    """Return only the payload segment of a data URL; other text is returned as-is."""
    if not text.startswith(_DATA_URL_SCHEME):
        return text
    _header, separator, payload = text.partition(",")
    return payload if separator else text


async def encode_file(selected: SelectedFile) -> str:
    """Encode a selected file's content as plain base64 text."""
    return strip_data_url_prefix(await read_as_data_url(selected))
