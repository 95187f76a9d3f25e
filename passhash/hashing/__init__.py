# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

"""Password hashing."""

from typing import Any

from .dispatcher import PasswordHasherDispatcher
from .functions import (
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
from .protocol import Hasher, Password


def __getattr__(name: str) -> Any:
    # the shared dispatcher reads the environment on first access
    if name == "password_hasher":
        return default_hasher()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "password_hasher",
    "default_hasher",
    "Hasher",
    "Password",
    "PasswordHasherDispatcher",
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
