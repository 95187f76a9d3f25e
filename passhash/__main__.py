# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.
"""Allow running ``python -m passhash``."""

from passhash.cli import app

if __name__ == "__main__":
    app()
