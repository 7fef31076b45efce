import base64
import io
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from impact_analyzer.acquisition.models import SelectedFile

_ONE_PIXEL_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page typhoon report PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Typhoon bulletin: signal no. 8 lowered at 14:00")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_image_bytes() -> bytes:
    return _ONE_PIXEL_PNG


@pytest.fixture()
def image_file(sample_image_bytes: bytes) -> SelectedFile:
    return SelectedFile.from_bytes("cctv.png", "image/png", sample_image_bytes)


@pytest.fixture()
def document_file(sample_pdf_bytes: bytes) -> SelectedFile:
    return SelectedFile.from_bytes("report.pdf", "application/pdf", sample_pdf_bytes)


@pytest.fixture()
def image_on_disk(tmp_path: Path, sample_image_bytes: bytes) -> Path:
    path = tmp_path / "cctv.jpg"
    path.write_bytes(sample_image_bytes)
    return path


@pytest.fixture()
def pdf_on_disk(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    path = tmp_path / "typhoon_report.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path
