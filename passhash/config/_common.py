# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

"""Common configuration constants."""

ENV_PREFIX = "PASSHASH_"
DOT_ENV_NAME = ".env"
