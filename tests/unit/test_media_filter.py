from impact_analyzer.acquisition.media_filter import DOCUMENT_FILTER, IMAGE_FILTER, MediaTypeFilter


class TestImageFilter:
    def test_accepts_any_image_subtype(self) -> None:
        assert IMAGE_FILTER.accepts("image/jpeg")
        assert IMAGE_FILTER.accepts("image/png")

    def test_is_case_insensitive(self) -> None:
        assert IMAGE_FILTER.accepts("IMAGE/PNG")

    def test_rejects_pdf(self) -> None:
        assert not IMAGE_FILTER.accepts("application/pdf")

    def test_rejects_lookalike_type(self) -> None:
        assert not IMAGE_FILTER.accepts("imagex/png")


class TestDocumentFilter:
    def test_accepts_pdf_only(self) -> None:
        assert DOCUMENT_FILTER.accepts("application/pdf")
        assert not DOCUMENT_FILTER.accepts("application/msword")
        assert not DOCUMENT_FILTER.accepts("image/png")

    def test_browse_extensions(self) -> None:
        assert DOCUMENT_FILTER.extensions == ("pdf",)


class TestCustomFilter:
    def test_multiple_patterns(self) -> None:
        accept = MediaTypeFilter(patterns=("text/plain", "application/json"))
        assert accept.accepts("application/json")
        assert accept.accepts("text/plain")
        assert not accept.accepts("text/html")
