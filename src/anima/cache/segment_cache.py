"""Disk-backed map from segment hash to a rendered partial video."""

import logging
import re
from pathlib import Path
from typing import Iterable

from ..constants import SEGMENT_FILE_PREFIX, SEGMENT_FILE_SUFFIX
from ..errors import CacheIOError

logger = logging.getLogger(__name__)

_SEGMENT_FILE_PATTERN = re.compile(
    rf"^{re.escape(SEGMENT_FILE_PREFIX)}([0-9a-f]{{8}}){re.escape(SEGMENT_FILE_SUFFIX)}$"
)
_TEMP_FILE_PATTERN = re.compile(
    rf"^{re.escape(SEGMENT_FILE_PREFIX)}[0-9a-f]{{8}}\.tmp{re.escape(SEGMENT_FILE_SUFFIX)}$"
)


def segment_filename(segment_hash: int) -> str:
    """Canonical file name for a segment hash, e.g. ``segment_00c0ffee.mp4``."""
    return f"{SEGMENT_FILE_PREFIX}{segment_hash & 0xFFFFFFFF:08x}{SEGMENT_FILE_SUFFIX}"


class SegmentCache:
    """Rendered segment files stored flat in one directory, keyed by hash."""

    def __init__(self, cache_dir: str | Path):
        self._dir = Path(cache_dir)

    @property
    def dir(self) -> Path:
        return self._dir

    def init(self) -> None:
        """Create the cache directory and clear temp files left by interrupted renders."""
        try:
            self._dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheIOError(f"Cannot create cache directory '{self._dir}': {e}") from e

        for entry in self._dir.iterdir():
            if not _TEMP_FILE_PATTERN.match(entry.name):
                continue
            try:
                entry.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                raise CacheIOError(f"Cannot remove stale temp file '{entry}': {e}") from e
            logger.debug("Removed stale temp file %s", entry.name)

    def get_path(self, segment_hash: int) -> Path:
        return self._dir / segment_filename(segment_hash)

    def get_temp_path(self, segment_hash: int) -> Path:
        """Path a segment is encoded to before it is moved into place."""
        path = self.get_path(segment_hash)
        return path.with_name(f"{path.stem}.tmp{path.suffix}")

    def has(self, segment_hash: int) -> bool:
        return self.get_path(segment_hash).is_file()

    def cached_hashes(self) -> set[int]:
        """Hashes of every segment file currently in the cache directory."""
        if not self._dir.is_dir():
            return set()
        hashes = set()
        for entry in self._dir.iterdir():
            match = _SEGMENT_FILE_PATTERN.match(entry.name)
            if match:
                hashes.add(int(match.group(1), 16))
        return hashes

    def prune(self, active_hashes: Iterable[int]) -> int:
        """
        Delete cached segments whose hash is not active.

        Only files following the segment naming convention are touched.

        Args:
            active_hashes: Hashes of the segments that are still in use

        Returns:
            Number of files removed

        Raises:
            CacheIOError: If a file cannot be deleted
        """
        active = {h & 0xFFFFFFFF for h in active_hashes}
        removed = 0
        for segment_hash in sorted(self.cached_hashes() - active):
            path = self.get_path(segment_hash)
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                raise CacheIOError(f"Cannot remove stale segment '{path}': {e}") from e
            logger.debug("Pruned stale segment %s", path.name)
            removed += 1
        return removed
