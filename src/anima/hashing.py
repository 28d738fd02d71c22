"""CRC32 fingerprints used to key the segment cache.

Non-cryptographic: the goal is a fast "did anything change?" check, so two
different inputs may collide.
"""

import struct
from typing import Iterable, Protocol, runtime_checkable

_CRC32_POLYNOMIAL = 0xEDB88320


def _build_crc32_table() -> tuple[int, ...]:
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            crc = (crc >> 1) ^ _CRC32_POLYNOMIAL if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_CRC32_TABLE = _build_crc32_table()


@runtime_checkable
class Hashable(Protocol):
    """Anything that contributes a fingerprint to a segment hash."""

    def compute_hash(self) -> int: ...


def crc32(data: bytes) -> int:
    """Compute the unsigned 32-bit CRC32 of a byte buffer."""
    crc = 0xFFFFFFFF
    for byte in data:
        crc = (crc >> 8) ^ _CRC32_TABLE[(crc ^ byte) & 0xFF]
    return crc ^ 0xFFFFFFFF


def hash_number(value: float) -> int:
    """Hash a number through its 8-byte IEEE-754 representation."""
    return crc32(struct.pack("<d", float(value)))


def hash_string(value: str) -> int:
    """Hash the UTF-8 encoding of a string."""
    return crc32(value.encode("utf-8"))


def hash_floats(values: Iterable[float]) -> int:
    """Hash a flat sequence of numbers packed as float64."""
    numbers = [float(v) for v in values]
    return crc32(struct.pack(f"<{len(numbers)}d", *numbers))


def hash_compose(*hashes: int) -> int:
    """
    Combine hashes into one. Order matters.

    Each hash is written big-endian as 4 bytes and the buffer is CRC32'd.

    Args:
        *hashes: Unsigned 32-bit hashes

    Returns:
        The composed hash
    """
    buffer = b"".join(struct.pack(">I", h & 0xFFFFFFFF) for h in hashes)
    return crc32(buffer)
