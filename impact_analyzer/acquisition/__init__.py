from impact_analyzer.acquisition.media_filter import DOCUMENT_FILTER, IMAGE_FILTER, MediaTypeFilter
from impact_analyzer.acquisition.models import FileRole, SelectedFile
from impact_analyzer.acquisition.slot import FileSlot

__all__ = [
    "DOCUMENT_FILTER",
    "IMAGE_FILTER",
    "FileRole",
    "FileSlot",
    "MediaTypeFilter",
    "SelectedFile",
]
