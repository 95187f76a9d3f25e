# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

"""Password hashing errors."""

from typing import Optional


class PasswordHashError(Exception):
    """Base class for all password hashing errors."""


class UnsupportedAlgorithm(PasswordHashError, ValueError):
    """The requested algorithm identifier is not known."""

    def __init__(self, algorithm: object) -> None:
        self.algorithm = algorithm
        super().__init__(f"Unsupported hash algorithm: {algorithm!r}")


class EmptyPassword(PasswordHashError, ValueError):
    """An empty password was given while empty passwords are disallowed."""

    def __init__(self) -> None:
        super().__init__("Password cannot be empty")


class SaltNotSupported(PasswordHashError, ValueError):
    """A salt was given to an algorithm that does not use one."""

    def __init__(self, algorithm: str) -> None:
        self.algorithm = algorithm
        super().__init__(f"Algorithm {algorithm} does not accept a salt")


class DelegateFailure(PasswordHashError):
    """The underlying hashing library rejected its inputs.

    Attributes
    ----------
    algorithm : str
        The algorithm that was selected.
    cause : Exception
        The error raised by the library.
    """

    def __init__(self, algorithm: str, cause: Exception) -> None:
        self.algorithm = algorithm
        self.cause = cause
        super().__init__(f"{algorithm} hashing failed: {cause}")


class EncodingFailure(PasswordHashError):
    """The password could not be converted to the bytes a hasher needs."""

    def __init__(
        self, algorithm: str, cause: Optional[Exception] = None
    ) -> None:
        self.algorithm = algorithm
        self.cause = cause
        # never quote the offending characters
        detail = f": {getattr(cause, 'reason', cause)}" if cause else ""
        super().__init__(f"Could not encode password for {algorithm}{detail}")


__all__ = [
    "PasswordHashError",
    "UnsupportedAlgorithm",
    "EmptyPassword",
    "SaltNotSupported",
    "DelegateFailure",
    "EncodingFailure",
]
