from .errors import (
    ConfigParseError,
    InvalidDirectoryError,
    InvalidExtensionError,
    InvalidNoteNameError,
    SeekerNotesError,
)
from .models import Config, NoteFile

__all__ = ["SeekerNotesError",
           "ConfigParseError",
           "InvalidDirectoryError",
           "InvalidExtensionError",
           "InvalidNoteNameError",
           "Config",
           "NoteFile"
           ]
