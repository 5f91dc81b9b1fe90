import os
import pytest

from media_organizer.core.common.errors import TransientFileError, TraversalError
from media_organizer.features.source_scanner.data.file_walker import LocalFileWalker


def _by_name(entries):
    return {e.name: e for e in entries}


def test_walk_reports_files_and_directories(media_tree):
    entries = _by_name(LocalFileWalker().walk(media_tree))

    assert set(entries) == {"a.mp4", "b.jpg", "c.txt", "sub", "d.png"}
    assert entries["sub"].is_dir is True
    assert entries["a.mp4"].is_dir is False
    assert entries["a.mp4"].size == 10
    assert entries["d.png"].size == 30
    assert entries["d.png"].path == media_tree / "sub" / "d.png"
    assert all(e.error is None for e in entries.values())


def test_walk_single_file_root(media_tree):
    entries = list(LocalFileWalker().walk(media_tree / "b.jpg"))

    assert len(entries) == 1
    assert entries[0].name == "b.jpg"
    assert entries[0].size == 20


def test_walk_empty_directory(tmp_path):
    empty = tmp_path / "empty"
    empty.mkdir()
    assert list(LocalFileWalker().walk(empty)) == []


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_dangling_symlink_is_reported_per_file(tmp_path):
    (tmp_path / "ghost.mp4").symlink_to(tmp_path / "does_not_exist.mp4")

    entries = list(LocalFileWalker().walk(tmp_path))

    assert len(entries) == 1
    assert entries[0].name == "ghost.mp4"
    assert isinstance(entries[0].error, TransientFileError)


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="fifos unsupported")
def test_non_regular_files_are_not_reported(tmp_path):
    os.mkfifo(tmp_path / "pipe.mp4")
    (tmp_path / "real.mp4").write_bytes(b"x")

    names = [e.name for e in LocalFileWalker().walk(tmp_path)]
    assert names == ["real.mp4"]


def test_directory_error_aborts_walk():
    error = PermissionError(13, "Permission denied", "/srv/locked")

    with pytest.raises(TraversalError) as exc_info:
        LocalFileWalker._on_walk_error(error)

    assert exc_info.value.path == "/srv/locked"
    assert exc_info.value.cause is error


def test_vanished_directory_is_ignored():
    # Must not raise
    LocalFileWalker._on_walk_error(FileNotFoundError(2, "No such file or directory", "/srv/gone"))


def test_unlistable_subdirectory_raises(tmp_path, monkeypatch):
    locked = tmp_path / "locked"
    locked.mkdir()
    (tmp_path / "ok.mp4").write_bytes(b"x")

    real_scandir = os.scandir

    def fake_scandir(path):
        if os.fspath(path) == str(locked):
            raise PermissionError(13, "Permission denied", str(locked))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    with pytest.raises(TraversalError):
        list(LocalFileWalker().walk(tmp_path))
