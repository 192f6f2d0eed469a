from __future__ import annotations

from PySide6.QtWidgets import QApplication

from seekernotes.app import SeekerNotesApp, build_app
from seekernotes.core.models import Config
from seekernotes.logging_setup import SESSION_ID, install_global_exception_hooks, setup_logging
from seekernotes.ui.dialogs import QtDirectoryPicker


def ensure_notes_directory(app: SeekerNotesApp) -> Config | None:
    """
    First-run flow: if the stored directory is unusable, ask for one.
    A cancelled pick keeps whatever is stored.
    """
    cfg = app.get_config()
    if cfg is None:
        return None
    if app.is_user_dir_valid(cfg):
        return cfg

    path = app.open_folder_dialog()
    if not path:
        return cfg

    app.save_config(Config(user_selected_directory=path))
    return app.reload_config()


def main() -> int:
    log = setup_logging()
    install_global_exception_hooks(log)
    _qt_app = QApplication([])

    app = build_app(pick_directory=QtDirectoryPicker(title="Select a folder"))
    app.startup()
    if app.load_error is not None:
        log.error("Starting without a config: %s", app.load_error)
        return 0

    cfg = ensure_notes_directory(app)
    if cfg is None or not app.is_user_dir_valid(cfg):
        log.warning("No notes directory selected")
        return 0

    notes = app.load_snts_from_dir(cfg)
    log.info("SeekerNotes backend ready, SID=%s, notes=%d, dir=%s",
             SESSION_ID, len(notes), cfg.user_selected_directory)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
