# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

# pylint: disable=line-too-long
# flake8: noqa: E501
"""Unix crypt(3) style password hashers (SHA-512, SHA-256, MD5, APR1)."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from passlib.hash import (  # type: ignore[import-untyped]
    apr_md5_crypt,
    md5_crypt,
    sha256_crypt,
    sha512_crypt,
)

from ..errors import DelegateFailure
from ._common import to_bytes
from .protocol import Password

# rounds used when the "rounds=" field is omitted from a $5$/$6$ hash
SHA_CRYPT_DEFAULT_ROUNDS = 5000


@dataclass(frozen=True)
class CryptHasher:
    """Crypt style hasher backed by a passlib handler."""

    name: str
    handler: Any = field(repr=False)
    rounds: Optional[int] = None

    def _configured(self, salt: Optional[str]) -> Any:
        options: Dict[str, Any] = {}
        if self.rounds is not None:
            options["rounds"] = self.rounds
        if salt:
            options["salt"] = salt
        if not options:
            return self.handler
        return self.handler.using(**options)

    def hash(self, plain: Password, salt: Optional[str] = None) -> str:
        """Hash password using the crypt handler.

        Parameters
        ----------
        plain : Password
            The plain secret to hash.
        salt : Optional[str]
            The salt to use. If empty or not given, passlib
            generates a random salt of the handler's default size.

        Returns
        -------
        str
            The hashed secret (e.g. ``$6$<salt>$<checksum>``).

        Raises
        ------
        DelegateFailure
            If passlib rejects the salt, the rounds or the password
            (one with a NUL byte or longer than 4096 bytes).
        """
        secret = to_bytes(plain, self.name)
        try:
            return str(self._configured(salt).hash(secret))
        except (ValueError, TypeError) as error:
            raise DelegateFailure(self.name, error) from error


def sha512_crypt_hasher(rounds: int = SHA_CRYPT_DEFAULT_ROUNDS) -> CryptHasher:
    """Get a SHA-512-crypt ($6$) hasher."""
    return CryptHasher("sha512", sha512_crypt, rounds=rounds)


def sha256_crypt_hasher(rounds: int = SHA_CRYPT_DEFAULT_ROUNDS) -> CryptHasher:
    """Get a SHA-256-crypt ($5$) hasher."""
    return CryptHasher("sha256", sha256_crypt, rounds=rounds)


def md5_crypt_hasher() -> CryptHasher:
    """Get an MD5-crypt ($1$) hasher."""
    return CryptHasher("md5", md5_crypt)


def apr1_crypt_hasher() -> CryptHasher:
    """Get an Apache MD5-crypt ($apr1$) hasher."""
    return CryptHasher("apr1", apr_md5_crypt)


__all__ = [
    "CryptHasher",
    "SHA_CRYPT_DEFAULT_ROUNDS",
    "sha512_crypt_hasher",
    "sha256_crypt_hasher",
    "md5_crypt_hasher",
    "apr1_crypt_hasher",
]
