from __future__ import annotations

from PySide6.QtWidgets import QFileDialog, QWidget


class QtDirectoryPicker:
    """Native folder chooser; callable so it plugs straight into SeekerNotesApp."""

    def __init__(self, parent: QWidget | None = None, *, title: str = "Select a folder"):
        self._parent = parent
        self._title = title

    def __call__(self) -> str:
        path = QFileDialog.getExistingDirectory(self._parent, self._title)
        return path or ""
