from __future__ import annotations


class SeekerNotesError(Exception):
    """Base class for errors raised by the notes backend."""


class ConfigParseError(SeekerNotesError, ValueError):
    """config.json exists but does not hold a JSON object."""

    def __init__(self, path, reason: str):
        super().__init__(f"cannot parse config file '{path}': {reason}")
        self.path = path
        self.reason = reason


class InvalidExtensionError(SeekerNotesError, ValueError):
    def __init__(self, path, suffix: str):
        super().__init__(f"file must have a {suffix} extension: {path}")
        self.path = path
        self.suffix = suffix


class InvalidDirectoryError(SeekerNotesError):
    def __init__(self, directory: str):
        super().__init__(f"invalid user directory: {directory!r}")
        self.directory = directory


class InvalidNoteNameError(SeekerNotesError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"invalid note name: {name!r}")
        self.name = name
