# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

"""Password to bytes conversions shared by the hashers."""

from ..errors import EncodingFailure
from .protocol import Password


def to_bytes(plain: Password, algorithm: str) -> bytes:
    """Get the raw bytes of a password.

    Text is encoded as UTF-8, bytes are used as they are.

    Parameters
    ----------
    plain : Password
        The plain password.
    algorithm : str
        The algorithm the bytes are for (used in errors).

    Returns
    -------
    bytes
        The password bytes.

    Raises
    ------
    EncodingFailure
        If the text cannot be encoded as UTF-8 (e.g. lone surrogates).
    TypeError
        If the password is neither text nor bytes.
    """
    if isinstance(plain, str):
        try:
            return plain.encode("utf-8")
        except UnicodeEncodeError as error:
            raise EncodingFailure(algorithm, error) from error
    if isinstance(plain, (bytes, bytearray, memoryview)):
        return bytes(plain)
    raise TypeError(
        f"Password must be str or bytes, not {type(plain).__name__}"
    )


def to_utf16le(plain: Password, algorithm: str) -> bytes:
    """Get the little-endian UTF-16 encoding of a password (no BOM).

    Bytes are decoded as UTF-8 first.

    Parameters
    ----------
    plain : Password
        The plain password.
    algorithm : str
        The algorithm the bytes are for (used in errors).

    Returns
    -------
    bytes
        The UTF-16LE encoded password.

    Raises
    ------
    EncodingFailure
        If the password is not valid UTF-8 or not encodable as UTF-16.
    """
    try:
        text = to_bytes(plain, algorithm).decode("utf-8")
        return text.encode("utf-16-le")
    except UnicodeError as error:
        raise EncodingFailure(algorithm, error) from error


def is_empty(plain: Password) -> bool:
    """Check if a password is empty."""
    return len(plain) == 0


__all__ = ["to_bytes", "to_utf16le", "is_empty"]
