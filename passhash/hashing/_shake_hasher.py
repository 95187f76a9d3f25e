# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

"""SHA-3 SHAKE (extendable-output) password hashers."""

import hashlib
from dataclasses import dataclass
from typing import Literal, Optional

from ..errors import DelegateFailure, SaltNotSupported
from ._common import to_bytes
from .protocol import Password

# 64 bytes gives 256-bit collision resistance
SHAKE_DEFAULT_DIGEST_SIZE = 64


@dataclass(frozen=True)
class ShakeHasher:
    """SHAKE-128 / SHAKE-256 hasher."""

    name: str
    variant: Literal[128, 256] = 256
    digest_size: int = SHAKE_DEFAULT_DIGEST_SIZE

    def hash(self, plain: Password, salt: Optional[str] = None) -> str:
        """Hash password using SHAKE.

        Parameters
        ----------
        plain : Password
            The plain secret to hash.
        salt : Optional[str]
            Must not be given, SHAKE is used unsalted.

        Returns
        -------
        str
            The lowercase hex digest, ``2 * digest_size`` characters.

        Raises
        ------
        SaltNotSupported
            If a salt is given.
        DelegateFailure
            If the digest size is not accepted.
        """
        if salt:
            raise SaltNotSupported(self.name)
        data = to_bytes(plain, self.name)
        xof = hashlib.new(f"shake_{self.variant}", data)
        try:
            return xof.hexdigest(self.digest_size)  # type: ignore[call-arg]
        except (ValueError, OverflowError) as error:
            raise DelegateFailure(self.name, error) from error


def shake256_hasher(
    digest_size: int = SHAKE_DEFAULT_DIGEST_SIZE,
) -> ShakeHasher:
    """Get a SHAKE-256 hasher."""
    return ShakeHasher("sha3-shake256", 256, digest_size)


def shake128_hasher(
    digest_size: int = SHAKE_DEFAULT_DIGEST_SIZE,
) -> ShakeHasher:
    """Get a SHAKE-128 hasher."""
    return ShakeHasher("sha3-shake128", 128, digest_size)


__all__ = [
    "ShakeHasher",
    "SHAKE_DEFAULT_DIGEST_SIZE",
    "shake256_hasher",
    "shake128_hasher",
]
