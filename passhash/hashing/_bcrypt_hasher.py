# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

"""Bcrypt password hasher."""

from dataclasses import dataclass
from typing import Optional

import bcrypt

from ..errors import DelegateFailure
from ._common import to_bytes
from .protocol import Password

BCRYPT_DEFAULT_COST = 10
BCRYPT_MAX_PASSWORD_BYTES = 72


@dataclass(frozen=True)
class BcryptHasher:
    """Bcrypt hasher."""

    name: str = "bcrypt"
    cost: int = BCRYPT_DEFAULT_COST
    prefix: bytes = b"2a"

    def hash(self, plain: Password, salt: Optional[str] = None) -> str:
        """Hash password using bcrypt.

        Parameters
        ----------
        plain : Password
            The plain secret to hash.
        salt : Optional[str]
            A full bcrypt salt (``$2a$<cost>$<22 chars>``).
            A fresh one is generated with the configured cost if not given.

        Returns
        -------
        str
            The hashed secret.

        Raises
        ------
        DelegateFailure
            If the password is longer than 72 bytes, or bcrypt
            rejects the cost, prefix or salt.
        """
        secret = to_bytes(plain, self.name)
        # bcrypt only reads the first 72 bytes
        if len(secret) > BCRYPT_MAX_PASSWORD_BYTES:
            raise DelegateFailure(
                self.name,
                ValueError(
                    "password cannot be longer than "
                    f"{BCRYPT_MAX_PASSWORD_BYTES} bytes"
                ),
            )
        try:
            if salt:
                bcrypt_salt = salt.encode("ascii")
            else:
                bcrypt_salt = bcrypt.gensalt(
                    rounds=self.cost, prefix=self.prefix
                )
            return bcrypt.hashpw(secret, bcrypt_salt).decode("ascii")
        except ValueError as error:
            raise DelegateFailure(self.name, error) from error


__all__ = ["BcryptHasher", "BCRYPT_DEFAULT_COST", "BCRYPT_MAX_PASSWORD_BYTES"]
