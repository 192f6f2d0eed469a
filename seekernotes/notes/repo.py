from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from seekernotes.config.store import ConfigStore, is_user_dir_valid
from seekernotes.core.errors import (
    InvalidDirectoryError,
    InvalidExtensionError,
    InvalidNoteNameError,
)
from seekernotes.core.models import Config, NoteFile
from seekernotes.infrastructure.filesystem import atomic_write_text, read_text_verbatim
from seekernotes.settings import NOTE_SUFFIX

log = logging.getLogger(__name__)


def note_path(directory: str | Path, name: str) -> Path:
    return Path(directory) / f"{name}{NOTE_SUFFIX}"


def _check_note_name(name: str) -> None:
    if not name or name in (".", ".."):
        raise InvalidNoteNameError(name)
    if "/" in name or "\\" in name or os.sep in name:
        raise InvalidNoteNameError(name)


@dataclass(frozen=True)
class NoteRepository:
    """
    .snt files inside the directory named by Config.

    Nothing is cached: every call goes back to disk.
    """
    config_store: ConfigStore

    def load_all_from_dir(self, cfg: Config) -> list[NoteFile]:
        self.config_store.ensure_config_path_exists()
        if not is_user_dir_valid(cfg):
            raise InvalidDirectoryError(cfg.user_selected_directory)

        directory = Path(cfg.user_selected_directory)
        notes: list[NoteFile] = []
        for entry in directory.iterdir():
            try:
                notes.append(self.load_one(entry))
            except (InvalidExtensionError, OSError) as exc:
                log.warning("Skipping %s: %s", entry.name, exc)

        notes.sort(key=lambda n: n.name.lower())
        log.debug("Loaded %d note(s) from %s", len(notes), directory)
        return notes

    def load_one(self, path: str | Path) -> NoteFile:
        """Read one .snt file; content comes back raw, html_content empty."""
        path_str = os.fspath(path)
        if not path_str.endswith(NOTE_SUFFIX):
            raise InvalidExtensionError(path_str, NOTE_SUFFIX)

        content = read_text_verbatim(Path(path_str))
        name = os.path.basename(path_str)[: -len(NOTE_SUFFIX)]
        return NoteFile(name=name, content=content)

    def save_one(self, cfg: Config, content: str, name: str) -> Path:
        """
        Write `content` to <dir>/<name>.snt, replacing an existing file.

        The directory is not re-validated; if it is unusable the OS write
        fails and the OSError propagates.
        """
        self.config_store.ensure_config_path_exists()
        if not cfg.user_selected_directory:
            raise InvalidDirectoryError(cfg.user_selected_directory)
        _check_note_name(name)

        path = note_path(cfg.user_selected_directory, name)
        atomic_write_text(path, content)
        log.info("Note saved: %s", path)
        return path
