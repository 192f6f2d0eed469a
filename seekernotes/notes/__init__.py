from .repo import NoteRepository, note_path

__all__ = ["NoteRepository", "note_path"]
