# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password hashing protocol."""

from typing import Optional, Protocol, Union, runtime_checkable

Password = Union[str, bytes]
"""A plain password, text or raw bytes."""


@runtime_checkable
class Hasher(Protocol):  # pragma: no cover
    """Protocol for single-algorithm password hashing implementations."""

    name: str

    def hash(self, plain: Password, salt: Optional[str] = None) -> str:
        """Hash a plain password.

        Parameters
        ----------
        plain : Password
            The plain password
        salt : Optional[str]
            The salt to use, if the algorithm takes one.
            A random salt is generated when not given.
        """
        ...


__all__ = ["Hasher", "Password"]
