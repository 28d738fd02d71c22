"""Tests for CRC32 fingerprints."""

import math
import zlib

from anima.hashing import crc32, hash_compose, hash_floats, hash_number, hash_string


def test_crc32_check_value():
    """crc32 should produce the standard check value for '123456789'."""
    assert crc32(b"123456789") == 0xCBF43926


def test_crc32_empty_input():
    """crc32 of no bytes is zero."""
    assert crc32(b"") == 0


def test_crc32_matches_zlib():
    """crc32 should agree with zlib on arbitrary data."""
    data = bytes(range(256)) * 3
    assert crc32(data) == zlib.crc32(data)


def test_hash_number_distinguishes_signed_zero():
    """0.0 and -0.0 have different encodings and must hash differently."""
    assert hash_number(0.0) != hash_number(-0.0)


def test_hash_number_distinguishes_zero_from_small_negative():
    """Zero and a small negative value never share a hash."""
    assert hash_number(0) != hash_number(-0.001)


def test_hash_number_is_stable_for_special_values():
    """NaN and infinity hash to the same value every time."""
    assert hash_number(math.inf) == hash_number(math.inf)
    assert hash_number(math.nan) == hash_number(math.nan)


def test_hash_number_treats_int_and_float_alike():
    """Integers are hashed through their float64 encoding."""
    assert hash_number(1) == hash_number(1.0)


def test_hash_string_uses_utf8():
    """hash_string should hash the UTF-8 bytes."""
    assert hash_string("héllo") == crc32("héllo".encode("utf-8"))


def test_hash_floats_depends_on_order():
    """Reordering values changes the hash."""
    assert hash_floats((1.0, 2.0)) != hash_floats((2.0, 1.0))


def test_hash_compose_is_order_sensitive():
    """hash_compose(a, b) should differ from hash_compose(b, a)."""
    a = hash_string("a")
    b = hash_string("b")
    assert hash_compose(a, b) != hash_compose(b, a)


def test_hash_compose_is_deterministic():
    """The same inputs always compose to the same hash."""
    hashes = [hash_number(i) for i in range(5)]
    assert hash_compose(*hashes) == hash_compose(*hashes)
    assert 0 <= hash_compose(*hashes) <= 0xFFFFFFFF
