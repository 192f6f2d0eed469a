from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Callable, Optional

from seekernotes.config.store import ConfigStore
from seekernotes.core.errors import ConfigParseError
from seekernotes.core.models import Config, NoteFile
from seekernotes.notes.repo import NoteRepository
from seekernotes.services.snt_markup import FontStyle, SntRenderer, detect_font_style

log = logging.getLogger(__name__)

# returns an absolute directory path, or "" when the user cancels
DirectoryPicker = Callable[[], str]


class SeekerNotesApp:
    """
    Boundary the GUI shell talks to.

    Holds exactly one piece of state: the Config read at startup.
    save_config() does not touch that cached copy; call reload_config()
    to pick up what was written.
    """

    def __init__(
        self,
        *,
        config_store: ConfigStore,
        repo: NoteRepository,
        pick_directory: DirectoryPicker,
        renderer: SntRenderer | None = None,
    ):
        self._config_store = config_store
        self._repo = repo
        self._pick_directory = pick_directory
        self._renderer = renderer or SntRenderer()
        self._config: Optional[Config] = None
        self._load_error: Optional[Exception] = None

    # ───────────────────────── config ─────────────────────────

    def startup(self) -> None:
        """Best-effort initial load; a failure leaves the app in the unloaded state."""
        try:
            self._config = self._config_store.get_config()
            self._load_error = None
            log.info("Config loaded at startup: %s", self._config_store.config_path)
        except (OSError, ConfigParseError) as exc:
            self._config = None
            self._load_error = exc
            log.warning("Config could not be loaded at startup: %s", exc)

    @property
    def config(self) -> Optional[Config]:
        return self._config

    @property
    def load_error(self) -> Optional[Exception]:
        return self._load_error

    @property
    def is_config_loaded(self) -> bool:
        return self._config is not None

    def get_config(self) -> Optional[Config]:
        return self._config

    def save_config(self, cfg: Config) -> None:
        self._config_store.save_config(cfg)

    def reload_config(self) -> Config:
        cfg = self._config_store.get_config()
        self._config = cfg
        self._load_error = None
        return cfg

    def is_user_dir_valid(self, cfg: Config) -> bool:
        return self._config_store.is_user_dir_valid(cfg)

    def open_folder_dialog(self) -> str:
        path = self._pick_directory() or ""
        if path:
            log.info("Directory picked: %s", path)
        else:
            log.info("Directory selection cancelled")
        return path

    # ───────────────────────── notes ─────────────────────────

    def load_snts_from_dir(self, cfg: Config) -> list[NoteFile]:
        return self._repo.load_all_from_dir(cfg)

    def load_snt_file_from_path(self, path: str | Path) -> NoteFile:
        return self._repo.load_one(path)

    def save_file(self, cfg: Config, content: str, name: str) -> Path:
        return self._repo.save_one(cfg, content, name)

    def render_note(self, note: NoteFile) -> NoteFile:
        return dataclasses.replace(note, html_content=self._renderer.render(note.content))

    def note_font_style(self, note: NoteFile) -> FontStyle | None:
        return detect_font_style(note.content)

    def save_editor_html(
        self,
        cfg: Config,
        html_text: str,
        name: str,
        font_style: FontStyle = "normal",
    ) -> Path:
        """Convert editor HTML to SNT markup and store it as <name>.snt."""
        return self._repo.save_one(cfg, self._renderer.to_snt(html_text, font_style), name)


def build_app(
    *,
    pick_directory: DirectoryPicker,
    config_root: Path | None = None,
) -> SeekerNotesApp:
    store = ConfigStore(config_root)
    return SeekerNotesApp(
        config_store=store,
        repo=NoteRepository(store),
        pick_directory=pick_directory,
    )
