# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.
"""Password hasher dispatcher supporting multiple hash formats."""

import logging
from typing import Dict, List, Optional, Union

from ..algorithms import CRYPT_STYLE, Algorithm, to_algorithm
from ..config import Settings
from ..errors import EmptyPassword, PasswordHashError
from ._bcrypt_hasher import BcryptHasher
from ._common import is_empty
from ._crypt_hasher import (
    apr1_crypt_hasher,
    md5_crypt_hasher,
    sha256_crypt_hasher,
    sha512_crypt_hasher,
)
from ._ntlm_hasher import NTLMHasher
from ._shake_hasher import shake128_hasher, shake256_hasher
from .protocol import Hasher, Password

LOG = logging.getLogger(__name__)


def build_hashers(settings: Settings) -> Dict[Algorithm, Hasher]:
    """Build the algorithm to hasher table.

    Parameters
    ----------
    settings : Settings
        The settings to configure the hashers with.

    Returns
    -------
    Dict[Algorithm, Hasher]
        One hasher per supported algorithm.
    """
    return {
        Algorithm.SHA512: sha512_crypt_hasher(settings.sha_crypt_rounds),
        Algorithm.SHA256: sha256_crypt_hasher(settings.sha_crypt_rounds),
        Algorithm.BCRYPT: BcryptHasher(cost=settings.bcrypt_cost),
        Algorithm.APR1: apr1_crypt_hasher(),
        Algorithm.MD5: md5_crypt_hasher(),
        Algorithm.MD4_NTLM: NTLMHasher(),
        Algorithm.SHA3_SHAKE256: shake256_hasher(settings.shake_digest_size),
        Algorithm.SHA3_SHAKE128: shake128_hasher(settings.shake_digest_size),
    }


class PasswordHasherDispatcher:
    """Dispatcher that selects a hasher by algorithm identifier."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize the dispatcher.

        Parameters
        ----------
        settings : Optional[Settings]
            The settings to use, loaded from the environment if not given.
        """
        self._settings = settings if settings is not None else Settings()
        self._hashers = build_hashers(self._settings)

    @property
    def settings(self) -> Settings:
        """The settings this dispatcher was built with."""
        return self._settings

    @property
    def algorithms(self) -> List[Algorithm]:
        """The algorithms this dispatcher can hash with."""
        return list(self._hashers)

    def get_hasher(self, algorithm: Union[Algorithm, str]) -> Hasher:
        """Get the hasher for an algorithm.

        Parameters
        ----------
        algorithm : Algorithm | str
            The algorithm or its identifier.

        Returns
        -------
        Hasher
            The hasher.

        Raises
        ------
        UnsupportedAlgorithm
            If the algorithm identifier is unknown.
        """
        return self._hashers[to_algorithm(algorithm)]

    def hash(
        self,
        plain: Password,
        algorithm: Union[Algorithm, str, None] = None,
        salt: Optional[str] = None,
    ) -> str:
        """Hash a password with the selected algorithm.

        Parameters
        ----------
        plain : Password
            The plain secret to hash.
        algorithm : Algorithm | str | None
            The algorithm or its exact identifier,
            the configured default if not given.
        salt : Optional[str]
            The salt for algorithms that take one.

        Returns
        -------
        str
            The hashed secret, as produced by the underlying library.

        Raises
        ------
        UnsupportedAlgorithm
            If the algorithm identifier is unknown.
        EmptyPassword
            If the password is empty and empty passwords are not allowed.
        PasswordHashError
            If the selected hasher fails.
        """
        if algorithm is None:
            algorithm = self._settings.default_algorithm
        selected = to_algorithm(algorithm)
        hasher = self._hashers[selected]
        if not self._settings.allow_empty_password and is_empty(plain):
            raise EmptyPassword()
        LOG.debug("Hashing password with %s", hasher.name)
        if selected in CRYPT_STYLE and not salt:
            LOG.debug("No salt given, %s generates a random one", hasher.name)
        try:
            return hasher.hash(plain, salt)
        except PasswordHashError as error:
            LOG.debug("Hashing with %s failed: %s", hasher.name, error)
            raise


__all__ = ["PasswordHasherDispatcher", "build_hashers"]
