# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.
"""Hashing specific configuration defaults.

Environment variables (with prefix PASSHASH_)
---------------------------------------------
DEFAULT_ALGORITHM (str) # default: sha512
BCRYPT_COST (int) # default: 10
SHA_CRYPT_ROUNDS (int) # default: 5000
SHAKE_DIGEST_SIZE (int) # default: 64
ALLOW_EMPTY_PASSWORD (bool) # default: True
"""

from ..algorithms import Algorithm

DEFAULT_ALGORITHM = Algorithm.SHA512
DEFAULT_BCRYPT_COST = 10
DEFAULT_SHA_CRYPT_ROUNDS = 5000
DEFAULT_SHAKE_DIGEST_SIZE = 64
DEFAULT_ALLOW_EMPTY_PASSWORD = True
