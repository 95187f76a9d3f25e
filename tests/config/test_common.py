# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

"""Test passhash.config._hashing defaults."""
# pylint: disable=missing-return-doc,missing-param-doc,unused-argument

import sys

import pytest

from passhash.algorithms import Algorithm
from passhash.config import Settings

# noinspection PyProtectedMember
from passhash.config._hashing import (
    DEFAULT_ALGORITHM,
    DEFAULT_ALLOW_EMPTY_PASSWORD,
    DEFAULT_BCRYPT_COST,
    DEFAULT_SHA_CRYPT_ROUNDS,
    DEFAULT_SHAKE_DIGEST_SIZE,
)
from passhash.hashing import PasswordHasherDispatcher

pytestmark = pytest.mark.usefixtures("clean_env")


def test_hashing_defaults() -> None:
    """Test the hashing defaults."""
    assert DEFAULT_ALGORITHM is Algorithm.SHA512
    assert DEFAULT_BCRYPT_COST == 10
    assert DEFAULT_SHA_CRYPT_ROUNDS == 5000
    assert DEFAULT_SHAKE_DIGEST_SIZE == 64
    assert DEFAULT_ALLOW_EMPTY_PASSWORD is True


def test_settings_use_defaults() -> None:
    """Test settings without environment variables."""
    settings = Settings()
    assert settings.default_algorithm is DEFAULT_ALGORITHM
    assert settings.bcrypt_cost == DEFAULT_BCRYPT_COST
    assert settings.sha_crypt_rounds == DEFAULT_SHA_CRYPT_ROUNDS
    assert settings.shake_digest_size == DEFAULT_SHAKE_DIGEST_SIZE
    assert settings.allow_empty_password is DEFAULT_ALLOW_EMPTY_PASSWORD


def test_host_program_arguments_are_ignored() -> None:
    """Test the arguments of the importing program do not change settings."""
    sys.argv += [
        "--algorithm",
        "md5",
        "--bcrypt-cost",
        "4",
        "--no-allow-empty-password",
    ]
    settings = Settings()
    assert settings.default_algorithm is Algorithm.SHA512
    assert settings.bcrypt_cost == 10
    assert settings.allow_empty_password is True

    dispatcher = PasswordHasherDispatcher()
    assert dispatcher.hash("pw").startswith("$6$")
    assert dispatcher.hash("", Algorithm.MD4_NTLM) == (
        "31d6cfe0d16ae931b73c59d7e0c089c0"
    )
