# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.
"""Configuration module for passhash."""

from ._common import DOT_ENV_NAME, ENV_PREFIX
from .settings import Settings

__all__ = [
    "Settings",
    "ENV_PREFIX",
    "DOT_ENV_NAME",
]
