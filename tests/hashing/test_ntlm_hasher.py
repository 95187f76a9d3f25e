# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

# pylint: disable=no-self-use,missing-param-doc

"""Tests for the NTLM hasher."""

import pytest
from passlib.hash import nthash

from passhash.errors import EncodingFailure, SaltNotSupported
from passhash.hashing._ntlm_hasher import NTLMHasher


class TestNTLMHasher:
    """Test NTLM hasher implementation."""

    @pytest.mark.parametrize(
        "password,expected",
        [
            ("password", "8846f7eaee8fb117ad06bdd830b7586c"),
            ("passphrase", "7f8fe03093cc84b267b109625f6bbf4b"),
            ("", "31d6cfe0d16ae931b73c59d7e0c089c0"),
        ],
    )
    def test_known_hashes(self, password: str, expected: str) -> None:
        """Test published NT hashes."""
        assert NTLMHasher().hash(password) == expected

    def test_bytes_password(self) -> None:
        """Test bytes are read as UTF-8 text."""
        hasher = NTLMHasher()
        assert hasher.hash(b"password") == hasher.hash("password")

    def test_matches_passlib_nthash(self) -> None:
        """Test non ASCII text is encoded as UTF-16LE."""
        password = "pässwörd密码"  # nosemgrep # nosec
        assert NTLMHasher().hash(password) == nthash.hash(password)

    def test_output_format(self) -> None:
        """Test the output is 32 lowercase hex chars."""
        hashed = NTLMHasher().hash("Some Password")
        assert len(hashed) == 32
        assert hashed == hashed.lower()
        int(hashed, 16)

    def test_invalid_utf8_bytes(self) -> None:
        """Test undecodable bytes are reported instead of ignored."""
        with pytest.raises(EncodingFailure) as exc_info:
            NTLMHasher().hash(b"\xff\xfe\xfd")

        assert exc_info.value.algorithm == "md4-ntlm"
        assert isinstance(exc_info.value.cause, UnicodeDecodeError)

    def test_lone_surrogate(self) -> None:
        """Test unencodable text is reported instead of ignored."""
        with pytest.raises(EncodingFailure):
            NTLMHasher().hash("abc\udc80")

    def test_salt_not_supported(self) -> None:
        """Test NTLM refuses a salt."""
        with pytest.raises(SaltNotSupported):
            NTLMHasher().hash("password", "salt")
