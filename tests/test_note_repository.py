import logging
import sys
import os

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from seekernotes.config.store import ConfigStore
from seekernotes.core.errors import (
    InvalidDirectoryError,
    InvalidExtensionError,
    InvalidNoteNameError,
)
from seekernotes.core.models import Config, NoteFile
from seekernotes.notes.repo import NoteRepository


@pytest.fixture
def notes_dir(tmp_path):
    d = tmp_path / "notes"
    d.mkdir()
    return d


@pytest.fixture
def repo(tmp_path):
    return NoteRepository(ConfigStore(tmp_path / "profile"))


def test_save_then_load_round_trip(repo, notes_dir):
    cfg = Config(user_selected_directory=str(notes_dir))

    path = repo.save_one(cfg, "hello world", "note1")
    note = repo.load_one(path)

    assert path == notes_dir / "note1.snt"
    assert note == NoteFile(name="note1", content="hello world", html_content="")
    assert note.to_dict() == {"name": "note1", "content": "hello world", "htmlContent": ""}


def test_save_keeps_content_verbatim(repo, notes_dir):
    cfg = Config(user_selected_directory=str(notes_dir))
    text = "[FONT:GEIST_SANS]\r\nline one\nline two\n"

    repo.save_one(cfg, text, "crlf")

    assert repo.load_one(str(notes_dir / "crlf.snt")).content == text


def test_save_overwrites_existing(repo, notes_dir):
    cfg = Config(user_selected_directory=str(notes_dir))
    repo.save_one(cfg, "first", "n")
    repo.save_one(cfg, "second", "n")

    assert repo.load_one(notes_dir / "n.snt").content == "second"
    assert sorted(p.name for p in notes_dir.iterdir()) == ["n.snt"]


def test_save_creates_config_dir(repo, notes_dir):
    repo.save_one(Config(user_selected_directory=str(notes_dir)), "x", "n")

    assert repo.config_store.config_dir.is_dir()


def test_save_into_missing_directory_fails(repo, tmp_path):
    cfg = Config(user_selected_directory=str(tmp_path / "gone"))

    with pytest.raises(OSError):
        repo.save_one(cfg, "x", "n")
    assert not (tmp_path / "gone").exists()


def test_save_rejects_empty_directory(repo):
    with pytest.raises(InvalidDirectoryError):
        repo.save_one(Config(), "x", "n")


@pytest.mark.parametrize("name", ["", "..", "a/b", "a\\b"])
def test_save_rejects_bad_names(repo, notes_dir, name):
    with pytest.raises(InvalidNoteNameError):
        repo.save_one(Config(user_selected_directory=str(notes_dir)), "x", name)


def test_load_one_requires_snt_suffix(repo, notes_dir):
    (notes_dir / "note1.txt").write_text("content", encoding="utf-8")

    with pytest.raises(InvalidExtensionError):
        repo.load_one(notes_dir / "note1.txt")
    with pytest.raises(InvalidExtensionError):
        repo.load_one("does-not-exist.txt")


def test_load_one_missing_file(repo, notes_dir):
    with pytest.raises(FileNotFoundError):
        repo.load_one(notes_dir / "missing.snt")


def test_load_all_skips_other_files(repo, notes_dir, caplog):
    (notes_dir / "b.snt").write_text("bee", encoding="utf-8")
    (notes_dir / "a.snt").write_text("ay", encoding="utf-8")
    (notes_dir / "readme.txt").write_text("ignored", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="seekernotes"):
        notes = repo.load_all_from_dir(Config(user_selected_directory=str(notes_dir)))

    assert notes == [NoteFile("a", "ay"), NoteFile("b", "bee")]
    assert "readme.txt" in caplog.text


def test_load_all_skips_directories_with_suffix(repo, notes_dir):
    (notes_dir / "folder.snt").mkdir()
    (notes_dir / "real.snt").write_text("ok", encoding="utf-8")

    notes = repo.load_all_from_dir(Config(user_selected_directory=str(notes_dir)))

    assert [n.name for n in notes] == ["real"]


def test_load_all_sorted_case_insensitive(repo, notes_dir):
    for name in ("beta", "Alpha", "gamma"):
        (notes_dir / f"{name}.snt").write_text(name, encoding="utf-8")

    notes = repo.load_all_from_dir(Config(user_selected_directory=str(notes_dir)))

    assert [n.name for n in notes] == ["Alpha", "beta", "gamma"]


def test_load_all_empty_dir(repo, notes_dir):
    assert repo.load_all_from_dir(Config(user_selected_directory=str(notes_dir))) == []


def test_load_all_invalid_directory(repo, tmp_path):
    with pytest.raises(InvalidDirectoryError):
        repo.load_all_from_dir(Config(user_selected_directory=""))
    with pytest.raises(InvalidDirectoryError) as exc_info:
        repo.load_all_from_dir(Config(user_selected_directory=str(tmp_path / "missing")))
    assert exc_info.value.directory == str(tmp_path / "missing")


def test_load_all_keeps_undecodable_notes(repo, notes_dir):
    (notes_dir / "good.snt").write_text("ok", encoding="utf-8")
    (notes_dir / "latin.snt").write_bytes(b"caf\xe9")

    notes = repo.load_all_from_dir(Config(user_selected_directory=str(notes_dir)))

    assert [n.name for n in notes] == ["good", "latin"]
    assert notes[1].content == "caf\ufffd"


def test_load_one_replaces_undecodable_bytes(repo, notes_dir):
    (notes_dir / "latin.snt").write_bytes(b"caf\xe9 ok")

    assert repo.load_one(notes_dir / "latin.snt") == NoteFile("latin", "caf\ufffd ok")


@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions and symlinks")
def test_save_keeps_mode_and_symlink(repo, notes_dir, tmp_path):
    cfg = Config(user_selected_directory=str(notes_dir))
    target = tmp_path / "elsewhere.snt"
    target.write_text("old", encoding="utf-8")
    target.chmod(0o600)
    (notes_dir / "linked.snt").symlink_to(target)

    repo.save_one(cfg, "new", "linked")

    assert (notes_dir / "linked.snt").is_symlink()
    assert target.read_text(encoding="utf-8") == "new"
    assert target.stat().st_mode & 0o777 == 0o600
