# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc
"""Shared fixtures for tests."""

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

from passhash.algorithms import Algorithm
from passhash.config import ENV_PREFIX, Settings
from passhash.hashing import PasswordHasherDispatcher

HERE = Path(__file__).parent


@pytest.fixture(name="clean_env")
def clean_env_fixture() -> Generator[None, None, None]:
    """Remove prefixed environment variables and extra cli args."""
    saved = {
        key: value
        for key, value in os.environ.items()
        if key.startswith(ENV_PREFIX)
    }
    for key in saved:
        os.environ.pop(key, None)
    original_argv = sys.argv[:]
    sys.argv = [str(HERE / "conftest.py")]
    yield
    sys.argv = original_argv
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            os.environ.pop(key, None)
    os.environ.update(saved)


@pytest.fixture(name="settings")
def settings_fixture() -> Settings:
    """Settings with the defaults and a cheap bcrypt cost."""
    return Settings(
        default_algorithm=Algorithm.SHA512,
        bcrypt_cost=4,
        sha_crypt_rounds=5000,
        shake_digest_size=64,
        allow_empty_password=True,
    )


@pytest.fixture(name="dispatcher")
def dispatcher_fixture(settings: Settings) -> PasswordHasherDispatcher:
    """A dispatcher built from the test settings."""
    return PasswordHasherDispatcher(settings)
