# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.
"""Password hashes for Unix crypt, bcrypt, htpasswd, NTLM and SHAKE."""

from typing import Any

from ._version import __version__
from .algorithms import Algorithm
from .errors import (
    DelegateFailure,
    EmptyPassword,
    EncodingFailure,
    PasswordHashError,
    SaltNotSupported,
    UnsupportedAlgorithm,
)
from .hashing import (
    Hasher,
    PasswordHasherDispatcher,
    default_hasher,
    hash_apr1,
    hash_bcrypt,
    hash_md4_ntlm,
    hash_md5,
    hash_password,
    hash_password_async,
    hash_sha3_shake128,
    hash_sha3_shake256,
    hash_sha256,
    hash_sha512,
)


def __getattr__(name: str) -> Any:
    if name == "password_hasher":
        return default_hasher()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "__version__",
    "Algorithm",
    "Hasher",
    "PasswordHasherDispatcher",
    "default_hasher",
    "password_hasher",
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
    "PasswordHashError",
    "UnsupportedAlgorithm",
    "EmptyPassword",
    "SaltNotSupported",
    "DelegateFailure",
    "EncodingFailure",
]
