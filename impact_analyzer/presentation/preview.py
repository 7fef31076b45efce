import pymupdf

from impact_analyzer.acquisition.models import SelectedFile
from impact_analyzer.logging.logger import Log


def image_preview_bytes(selected: SelectedFile) -> bytes | None:
    """Raw image bytes for display, or None when the file is gone."""
    try:
        return selected.read_bytes()
    except OSError as exc:
        Log.warning(f"Image preview unavailable for '{selected.name}': {exc}")
        return None


def document_preview_png(selected: SelectedFile, zoom: float = 1.5) -> bytes | None:
    """Render the first page of a PDF to PNG bytes.

    Returns None when the file cannot be read or is not a renderable PDF.
    """
    try:
        pdf_bytes = selected.read_bytes()
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            if doc.page_count == 0:
                return None
            page = doc.load_page(0)
            pix = page.get_pixmap(matrix=pymupdf.Matrix(zoom, zoom), alpha=False)
            return pix.tobytes("png")
    except Exception as exc:
        Log.warning(f"Document preview unavailable for '{selected.name}': {exc}")
        return None
