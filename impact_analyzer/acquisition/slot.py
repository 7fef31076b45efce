from collections.abc import Callable, Sequence

from impact_analyzer.acquisition.media_filter import MediaTypeFilter
from impact_analyzer.acquisition.models import FileRole, SelectedFile
from impact_analyzer.logging.logger import Log

SlotListener = Callable[["FileSlot"], None]


class FileSlot:
    """Single-file drop target constrained by a media-type filter.

    Holds at most one SelectedFile. A new drop replaces the current selection.
    """

    def __init__(self, role: FileRole, accept: MediaTypeFilter) -> None:
        self._role = role
        self._accept = accept
        self._selected: SelectedFile | None = None
        self._is_active = False
        self._listeners: list[SlotListener] = []

    @property
    def role(self) -> FileRole:
        return self._role

    @property
    def accept(self) -> MediaTypeFilter:
        return self._accept

    @property
    def selected(self) -> SelectedFile | None:
        return self._selected

    @property
    def is_filled(self) -> bool:
        return self._selected is not None

    @property
    def is_active(self) -> bool:
        """True only while a drag gesture hovers over this slot."""
        return self._is_active

    def subscribe(self, listener: SlotListener) -> None:
        self._listeners.append(listener)

    def drag_enter(self) -> None:
        self._set_active(True)

    def drag_leave(self) -> None:
        self._set_active(False)

    def offer(self, files: Sequence[SelectedFile]) -> None:
        """Deliver files through the picker; files outside the filter are dropped silently."""
        accepted = [f for f in files if self._accept.accepts(f.media_type)]
        if len(accepted) < len(files):
            Log.debug(
                f"{self._role.value} slot ignored {len(files) - len(accepted)} "
                f"file(s) outside {list(self._accept.patterns)}"
            )
        self.on_files_dropped(accepted)

    def on_files_dropped(self, files: Sequence[SelectedFile]) -> None:
        """Replace the selection with the first file; an empty drop changes nothing."""
        self._is_active = False
        if not files:
            self._notify()
            return
        self._selected = files[0]
        Log.debug(f"{self._role.value} slot selected {self._selected.name}")
        self._notify()

    def clear(self) -> None:
        self._selected = None
        self._notify()

    def _set_active(self, active: bool) -> None:
        if self._is_active != active:
            self._is_active = active
            self._notify()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)
