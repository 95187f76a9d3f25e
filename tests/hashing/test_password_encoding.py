# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

"""Tests for the password to bytes conversions."""

import pytest

from passhash.errors import EncodingFailure
from passhash.hashing._common import is_empty, to_bytes, to_utf16le


def test_to_bytes_text() -> None:
    """Test text is encoded as UTF-8."""
    assert to_bytes("pä", "md5") == b"p\xc3\xa4"


def test_to_bytes_bytes_like() -> None:
    """Test bytes like objects are copied as bytes."""
    assert to_bytes(b"raw", "md5") == b"raw"
    assert to_bytes(bytearray(b"raw"), "md5") == b"raw"  # type: ignore
    assert to_bytes(memoryview(b"raw"), "md5") == b"raw"  # type: ignore


def test_to_bytes_surrogate() -> None:
    """Test lone surrogates fail with the algorithm name."""
    with pytest.raises(EncodingFailure) as exc_info:
        to_bytes("\ud800", "sha512")
    assert exc_info.value.algorithm == "sha512"
    assert "sha512" in str(exc_info.value)
    assert "\ud800" not in str(exc_info.value)


def test_to_bytes_wrong_type() -> None:
    """Test other types are rejected."""
    with pytest.raises(TypeError):
        to_bytes(None, "md5")  # type: ignore[arg-type]


def test_to_utf16le() -> None:
    """Test UTF-16LE without a byte order mark."""
    assert to_utf16le("ab", "md4-ntlm") == b"a\x00b\x00"
    assert to_utf16le(b"ab", "md4-ntlm") == b"a\x00b\x00"
    assert to_utf16le("😀", "md4-ntlm") == "😀".encode("utf-16-le")
    assert to_utf16le("", "md4-ntlm") == b""


def test_to_utf16le_invalid_bytes() -> None:
    """Test bytes that are not UTF-8."""
    with pytest.raises(EncodingFailure):
        to_utf16le(b"\xc3", "md4-ntlm")


def test_is_empty() -> None:
    """Test the empty check for text and bytes."""
    assert is_empty("")
    assert is_empty(b"")
    assert not is_empty(" ")
    assert not is_empty(b"\x00")
