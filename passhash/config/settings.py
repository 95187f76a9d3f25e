# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

"""Passhash settings module."""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from ..algorithms import Algorithm
from ._common import ENV_PREFIX
from ._hashing import (
    DEFAULT_ALGORITHM,
    DEFAULT_ALLOW_EMPTY_PASSWORD,
    DEFAULT_BCRYPT_COST,
    DEFAULT_SHA_CRYPT_ROUNDS,
    DEFAULT_SHAKE_DIGEST_SIZE,
)

LOG = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings class."""

    default_algorithm: Algorithm = DEFAULT_ALGORITHM
    bcrypt_cost: Annotated[int, Field(ge=4, le=31)] = DEFAULT_BCRYPT_COST
    sha_crypt_rounds: Annotated[int, Field(ge=1000, le=999_999_999)] = (
        DEFAULT_SHA_CRYPT_ROUNDS
    )
    shake_digest_size: Annotated[int, Field(ge=1, le=1024)] = (
        DEFAULT_SHAKE_DIGEST_SIZE
    )
    allow_empty_password: bool = DEFAULT_ALLOW_EMPTY_PASSWORD

    model_config = SettingsConfigDict(
        populate_by_name=True,
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        cli_parse_args=False,  # we use typer
    )

    @classmethod
    def load(cls, dot_env: Optional[Path] = None) -> "Settings":
        """Load the settings.

        Parameters
        ----------
        dot_env : Optional[Path]
            A .env file to read first. Variables already set in the
            environment are kept.

        Returns
        -------
        Settings
            The settings instance
        """
        if dot_env is not None and dot_env.is_file():
            LOG.debug("Loading environment from %s", dot_env)
            load_dotenv(dot_env, override=False)
        return cls()
