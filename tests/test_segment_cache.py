"""Tests for the on-disk segment cache."""

from pathlib import Path

import pytest

from anima.cache import Segment, SegmentCache, segment_filename
from anima.errors import CacheIOError


def test_segment_filename_is_zero_padded_hex():
    """Hashes are written as 8 lowercase hex digits."""
    assert segment_filename(0xABC) == "segment_00000abc.mp4"
    assert segment_filename(0xDEADBEEF) == "segment_deadbeef.mp4"


def test_segment_duration():
    """Segment.duration is end minus start."""
    segment = Segment(index=0, start_time=1.0, end_time=2.5, animations=(), hash=1)
    assert segment.duration == 1.5


def test_init_is_idempotent(tmp_path):
    """init() creates the directory and can run again."""
    cache = SegmentCache(tmp_path / "cache" / "nested")
    cache.init()
    cache.init()

    assert cache.dir.is_dir()


def test_has_and_get_path(tmp_path):
    """has() reports whether the canonical file exists."""
    cache = SegmentCache(tmp_path)
    cache.init()
    assert not cache.has(0x1234)

    cache.get_path(0x1234).write_bytes(b"video")

    assert cache.has(0x1234)
    assert cache.get_path(0x1234) == tmp_path / "segment_00001234.mp4"


def test_prune_removes_only_inactive_segments(tmp_path):
    """prune() deletes stale segment files and leaves everything else."""
    cache = SegmentCache(tmp_path)
    cache.init()
    for h in (1, 2, 3):
        cache.get_path(h).write_bytes(b"x")
    (tmp_path / "notes.txt").write_text("keep")
    (tmp_path / "segment_zzzzzzzz.mp4").write_bytes(b"not ours")

    removed = cache.prune({2})

    assert removed == 2
    assert cache.has(2)
    assert not cache.has(1)
    assert not cache.has(3)
    assert (tmp_path / "notes.txt").exists()
    assert (tmp_path / "segment_zzzzzzzz.mp4").exists()


def test_prune_missing_directory_is_noop(tmp_path):
    """Pruning a cache that was never created removes nothing."""
    assert SegmentCache(tmp_path / "missing").prune(set()) == 0


def test_init_failure_raises_cache_io_error(tmp_path):
    """A cache directory that cannot be created raises CacheIOError."""
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")

    with pytest.raises(CacheIOError):
        SegmentCache(blocker / "cache").init()


def test_prune_stops_at_first_failed_deletion(tmp_path, monkeypatch):
    """A deletion failure raises CacheIOError and leaves later files in place."""
    cache = SegmentCache(tmp_path)
    cache.init()
    for h in (1, 2, 3):
        cache.get_path(h).write_bytes(b"x")
    attempts = []

    def failing_unlink(self, missing_ok=False):
        attempts.append(self.name)
        raise PermissionError("read-only")

    monkeypatch.setattr(Path, "unlink", failing_unlink)

    with pytest.raises(CacheIOError, match="read-only"):
        cache.prune(set())

    assert attempts == ["segment_00000001.mp4"]
    monkeypatch.undo()
    assert all(cache.has(h) for h in (1, 2, 3))


def test_init_clears_interrupted_temp_files(tmp_path):
    """Temp files from an interrupted render are removed; finished segments stay."""
    cache = SegmentCache(tmp_path)
    cache.get_path(0xABC).write_bytes(b"done")
    cache.get_temp_path(0xDEF).write_bytes(b"half")
    (tmp_path / "other.tmp.mp4").write_bytes(b"not ours")

    cache.init()

    assert cache.has(0xABC)
    assert not cache.get_temp_path(0xDEF).exists()
    assert (tmp_path / "other.tmp.mp4").exists()


def test_temp_path_is_not_a_cache_entry(tmp_path):
    """Temp files never count as cached segments."""
    cache = SegmentCache(tmp_path)
    cache.get_temp_path(0x1234).write_bytes(b"half")

    assert cache.get_temp_path(0x1234).name == "segment_00001234.tmp.mp4"
    assert not cache.has(0x1234)
    assert cache.cached_hashes() == set()
