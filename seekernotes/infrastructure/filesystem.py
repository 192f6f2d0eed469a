# seekernotes/infrastructure/filesystem.py

from __future__ import annotations

import os
import stat
import uuid
from contextlib import suppress
from pathlib import Path

TEXT_ENCODING = "utf-8"
NEW_FILE_MODE = 0o644


def atomic_write_text(
    path: Path,
    text: str,
    *,
    encoding: str = TEXT_ENCODING,
) -> None:
    """
    Atomic-ish file write:
    - write to temp file next to the real target
    - fsync
    - replace()

    A symlinked target is followed, so the link itself survives and the
    file it points at gets the new content.
    An existing file keeps its permission bits; a new one gets 0644
    (minus the umask).

    The parent directory is NOT created here: writing into a missing or
    unusable directory fails with the OS error.
    Newlines are written exactly as given.
    """
    path = Path(path)
    if path.is_symlink():
        path = path.resolve()

    try:
        mode = stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        mode = NEW_FILE_MODE & ~umask

    tmp_path = path.parent / f".{path.name}.tmp-{uuid.uuid4().hex}"

    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_path, mode)
        tmp_path.replace(path)
    finally:
        with suppress(OSError):
            if tmp_path.exists():
                tmp_path.unlink()


def read_text_verbatim(path: Path, *, encoding: str = TEXT_ENCODING) -> str:
    """
    Whole-file read without newline translation.
    Bytes that do not decode become U+FFFD instead of failing the read.
    """
    with open(path, "r", encoding=encoding, errors="replace", newline="") as f:
        return f.read()
