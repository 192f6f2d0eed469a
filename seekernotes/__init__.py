from .app import SeekerNotesApp, build_app
from .config import ConfigStore
from .core import (
    Config,
    ConfigParseError,
    InvalidDirectoryError,
    InvalidExtensionError,
    InvalidNoteNameError,
    NoteFile,
    SeekerNotesError,
)
from .notes import NoteRepository

__all__ = ['SeekerNotesApp',
           'build_app',
           'ConfigStore',
           'NoteRepository',
           'Config',
           'NoteFile',
           'SeekerNotesError',
           'ConfigParseError',
           'InvalidDirectoryError',
           'InvalidExtensionError',
           'InvalidNoteNameError'
           ]
