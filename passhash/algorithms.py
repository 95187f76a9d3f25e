# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

"""Supported hash algorithm identifiers."""

from enum import Enum
from typing import Union

from .errors import UnsupportedAlgorithm


class Algorithm(str, Enum):
    """The hash algorithm identifier."""

    SHA512 = "sha512"
    SHA256 = "sha256"
    BCRYPT = "bcrypt"
    APR1 = "apr1"
    MD5 = "md5"
    MD4_NTLM = "md4-ntlm"
    SHA3_SHAKE256 = "sha3-shake256"
    SHA3_SHAKE128 = "sha3-shake128"


CRYPT_STYLE = frozenset(
    {Algorithm.SHA512, Algorithm.SHA256, Algorithm.APR1, Algorithm.MD5}
)


def to_algorithm(value: Union[Algorithm, str]) -> Algorithm:
    """Resolve an algorithm identifier.

    Parameters
    ----------
    value : Algorithm | str
        The algorithm or its exact (case-sensitive) identifier.

    Returns
    -------
    Algorithm
        The matching algorithm.

    Raises
    ------
    UnsupportedAlgorithm
        If the identifier does not match any algorithm.
    """
    if isinstance(value, Algorithm):
        return value
    if not isinstance(value, str):
        raise UnsupportedAlgorithm(value)
    try:
        return Algorithm(value)
    except ValueError as error:
        raise UnsupportedAlgorithm(value) from error


__all__ = ["Algorithm", "CRYPT_STYLE", "to_algorithm"]
