from __future__ import annotations

import errno
import json
import logging
from pathlib import Path

from platformdirs import user_config_path

from seekernotes.core.errors import ConfigParseError
from seekernotes.core.models import Config
from seekernotes.infrastructure.filesystem import atomic_write_text
from seekernotes.settings import CONFIG_FILE_NAME, CONFIG_FOLDER_NAME

log = logging.getLogger(__name__)


def default_config_root() -> Path:
    # %AppData% on Windows, ~/Library/Application Support on macOS, ~/.config elsewhere
    return user_config_path(roaming=True)


def is_user_dir_valid(cfg: Config) -> bool:
    directory = cfg.user_selected_directory
    if not directory:
        return False

    path = Path(directory)
    if path.anchor and path == Path(path.anchor):
        return False

    try:
        return path.is_dir()
    except OSError:
        return False


class ConfigStore:
    """
    Reads and writes config.json inside <user-config-dir>/seekernotes/.

    `config_root` replaces the platform user-config directory; tests pass a
    tmp dir here so nothing touches the real profile.
    """

    def __init__(self, config_root: Path | None = None):
        self._config_root = Path(config_root) if config_root is not None else None

    @property
    def config_root(self) -> Path:
        return self._config_root if self._config_root is not None else default_config_root()

    @property
    def config_dir(self) -> Path:
        return self.config_root / CONFIG_FOLDER_NAME

    @property
    def config_path(self) -> Path:
        return self.config_dir / CONFIG_FILE_NAME

    def ensure_config_path_exists(self) -> Path:
        """Create the config folder if missing and return it (the folder, not the file)."""
        config_dir = self.config_dir

        if config_dir.exists() and not config_dir.is_dir():
            raise NotADirectoryError(
                errno.ENOTDIR,
                "config path exists but is not a directory",
                str(config_dir),
            )

        if not config_dir.exists():
            config_dir.mkdir(parents=True, exist_ok=True)
            log.info("Created config directory: %s", config_dir)

        return config_dir

    def get_config(self) -> Config:
        """
        Return the stored config.
        First run (no config.json yet) writes and returns the default one.
        """
        self.ensure_config_path_exists()
        path = self.config_path

        if not path.exists():
            cfg = Config()
            self.save_config(cfg)
            log.info("No config found, wrote defaults to %s", path)
            return cfg

        raw = path.read_bytes()
        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ConfigParseError(path, str(exc)) from exc

        if not isinstance(data, dict):
            raise ConfigParseError(path, f"expected a JSON object, got {type(data).__name__}")

        try:
            cfg = Config.from_dict(data)
        except TypeError as exc:
            raise ConfigParseError(path, str(exc)) from exc
        log.debug("Config loaded from %s: %s", path, cfg)
        return cfg

    def save_config(self, cfg: Config) -> None:
        """Overwrite config.json with the whole record."""
        self.ensure_config_path_exists()
        text = json.dumps(cfg.to_dict(), indent=2)
        atomic_write_text(self.config_path, text)
        log.info("Config saved: userSelectedDirectory=%s", cfg.user_selected_directory)

    @staticmethod
    def is_user_dir_valid(cfg: Config) -> bool:
        return is_user_dir_valid(cfg)
