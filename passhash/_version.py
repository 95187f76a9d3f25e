# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.
"""Version information for passhash."""

__version__ = "0.1.0"
