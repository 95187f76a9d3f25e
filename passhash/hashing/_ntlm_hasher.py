# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

"""MD4 based Windows NT (NTLM) password hasher."""

from dataclasses import dataclass
from typing import Optional

from passlib.crypto.digest import (  # type: ignore[import-untyped]
    lookup_hash,
)

from ..errors import DelegateFailure, SaltNotSupported
from ._common import to_utf16le
from .protocol import Password


@dataclass(frozen=True)
class NTLMHasher:
    """NTLM hasher: MD4 over the UTF-16LE encoded password."""

    name: str = "md4-ntlm"

    def hash(self, plain: Password, salt: Optional[str] = None) -> str:
        """Hash password the way Windows NT does.

        Parameters
        ----------
        plain : Password
            The plain secret to hash.
        salt : Optional[str]
            Must not be given, NTLM is unsalted.

        Returns
        -------
        str
            The 32 character lowercase hex digest.

        Raises
        ------
        SaltNotSupported
            If a salt is given.
        EncodingFailure
            If the password cannot be encoded as UTF-16LE.
        DelegateFailure
            If no MD4 implementation is available.
        """
        if salt:
            raise SaltNotSupported(self.name)
        data = to_utf16le(plain, self.name)
        try:
            # hashlib's md4 if OpenSSL still ships it, passlib's own otherwise
            md4 = lookup_hash("md4").const
        except (KeyError, ValueError) as error:  # pragma: no cover
            raise DelegateFailure(self.name, error) from error
        return str(md4(data).hexdigest())


__all__ = ["NTLMHasher"]
