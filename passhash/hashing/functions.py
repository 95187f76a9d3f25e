# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

"""Module level hashing functions using the default dispatcher."""

import asyncio
from functools import lru_cache
from typing import Optional, Union

from ..algorithms import Algorithm
from .dispatcher import PasswordHasherDispatcher
from .protocol import Password


@lru_cache(maxsize=1)
def default_hasher() -> PasswordHasherDispatcher:
    """Get the shared dispatcher, configured from the environment.

    Returns
    -------
    PasswordHasherDispatcher
        The dispatcher.
    """
    return PasswordHasherDispatcher()


def hash_password(
    password: Password,
    algorithm: Union[Algorithm, str],
    salt: Optional[str] = None,
) -> str:
    """Hash a password with the algorithm named by ``algorithm``.

    Parameters
    ----------
    password : Password
        The plain password.
    algorithm : Algorithm | str
        One of ``sha512``, ``sha256``, ``bcrypt``, ``apr1``, ``md5``,
        ``md4-ntlm``, ``sha3-shake256`` or ``sha3-shake128``.
    salt : Optional[str]
        The salt for algorithms that take one.

    Returns
    -------
    str
        The hash.

    Raises
    ------
    UnsupportedAlgorithm
        If the algorithm identifier is unknown.
    PasswordHashError
        If hashing fails.
    """
    return default_hasher().hash(password, algorithm, salt)


async def hash_password_async(
    password: Password,
    algorithm: Union[Algorithm, str],
    salt: Optional[str] = None,
) -> str:
    """Hash a password in a worker thread.

    Parameters
    ----------
    password : Password
        The plain password.
    algorithm : Algorithm | str
        The algorithm or its identifier.
    salt : Optional[str]
        The salt for algorithms that take one.

    Returns
    -------
    str
        The hash.
    """
    return await asyncio.to_thread(hash_password, password, algorithm, salt)


def hash_sha512(password: Password, salt: Optional[str] = None) -> str:
    """Get a Linux compatible SHA-512-crypt ($6$) hash."""
    return hash_password(password, Algorithm.SHA512, salt)


def hash_sha256(password: Password, salt: Optional[str] = None) -> str:
    """Get a Linux compatible SHA-256-crypt ($5$) hash."""
    return hash_password(password, Algorithm.SHA256, salt)


def hash_bcrypt(password: Password, salt: Optional[str] = None) -> str:
    """Get a bcrypt ($2a$) hash."""
    return hash_password(password, Algorithm.BCRYPT, salt)


def hash_apr1(password: Password, salt: Optional[str] = None) -> str:
    """Get an Apache htpasswd compatible APR1 ($apr1$) hash."""
    return hash_password(password, Algorithm.APR1, salt)


def hash_md5(password: Password, salt: Optional[str] = None) -> str:
    """Get a Linux compatible MD5-crypt ($1$) hash."""
    return hash_password(password, Algorithm.MD5, salt)


def hash_md4_ntlm(password: Password) -> str:
    """Get a Windows NT (NTLM) hash."""
    return hash_password(password, Algorithm.MD4_NTLM)


def hash_sha3_shake256(password: Password) -> str:
    """Get a SHA-3 SHAKE-256 hex digest."""
    return hash_password(password, Algorithm.SHA3_SHAKE256)


def hash_sha3_shake128(password: Password) -> str:
    """Get a SHA-3 SHAKE-128 hex digest."""
    return hash_password(password, Algorithm.SHA3_SHAKE128)


__all__ = [
    "default_hasher",
    "hash_password",
    "hash_password_async",
    "hash_sha512",
    "hash_sha256",
    "hash_bcrypt",
    "hash_apr1",
    "hash_md5",
    "hash_md4_ntlm",
    "hash_sha3_shake256",
    "hash_sha3_shake128",
]
