# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Passhash and contributors.

"""Command line interface module."""

# flake8: noqa: E501
# pylint: disable=too-many-arguments,too-many-positional-arguments
import logging
import logging.config
from pathlib import Path
from typing import Optional

import typer

from passhash._logging import LogLevel, get_log_level, get_logging_config
from passhash._version import __version__
from passhash.algorithms import Algorithm, to_algorithm
from passhash.config import DOT_ENV_NAME, Settings
from passhash.errors import PasswordHashError
from passhash.hashing import PasswordHasherDispatcher

APP_NAME = "passhash"
APP_HELP = "Generate password hashes (crypt, bcrypt, htpasswd, NTLM, SHAKE)"

DEFAULT_SETTINGS = Settings.load(Path.cwd() / DOT_ENV_NAME)

app = typer.Typer(
    name=APP_NAME,
    help=APP_HELP,
    add_completion=False,
    add_help_option=True,
    pretty_exceptions_short=True,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    log_level: LogLevel = typer.Option(
        default=get_log_level(),
        help="The log level",
        case_sensitive=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Shortcut for --log-level DEBUG",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
    ),
) -> None:
    """Password hashing command line interface."""
    if version:
        typer.echo(f"{APP_NAME} {__version__}")
        raise typer.Exit()
    if debug:
        log_level = LogLevel.DEBUG
    logging.config.dictConfig(get_logging_config(log_level.value))
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("hash")
def hash_command(
    password: Optional[str] = typer.Argument(
        None,
        help="The password to hash, prompted for if not given",
        show_default=False,
    ),
    algorithm: str = typer.Option(
        DEFAULT_SETTINGS.default_algorithm.value,
        "--algorithm",
        "-a",
        help="The hash algorithm, one of: "
        + ", ".join(item.value for item in Algorithm),
    ),
    salt: Optional[str] = typer.Option(
        None,
        "--salt",
        help="Fixed salt (crypt styles and bcrypt), random if not given",
        show_default=False,
    ),
    bcrypt_cost: int = typer.Option(
        DEFAULT_SETTINGS.bcrypt_cost,
        "--bcrypt-cost",
        min=4,
        max=31,
        help="The bcrypt cost factor",
    ),
    sha_crypt_rounds: int = typer.Option(
        DEFAULT_SETTINGS.sha_crypt_rounds,
        "--sha-crypt-rounds",
        min=1000,
        max=999_999_999,
        help="Rounds for sha256/sha512 crypt",
    ),
    shake_digest_size: int = typer.Option(
        DEFAULT_SETTINGS.shake_digest_size,
        "--shake-digest-size",
        min=1,
        max=1024,
        help="Output size in bytes for the SHAKE algorithms",
    ),
    allow_empty_password: bool = typer.Option(
        DEFAULT_SETTINGS.allow_empty_password,
        "--allow-empty-password/--no-allow-empty-password",
        help="Whether an empty password can be hashed",
    ),
) -> None:
    """Hash a password and print the result."""
    try:
        selected = to_algorithm(algorithm)
        if password is None:
            password = typer.prompt(
                "Password", hide_input=True, confirmation_prompt=True
            )
        settings = Settings(
            default_algorithm=selected,
            bcrypt_cost=bcrypt_cost,
            sha_crypt_rounds=sha_crypt_rounds,
            shake_digest_size=shake_digest_size,
            allow_empty_password=allow_empty_password,
        )
        logger = logging.getLogger(__name__)
        logger.debug("Effective settings: %s", settings.model_dump_json())
        hasher = PasswordHasherDispatcher(settings)
        hashed = hasher.hash(password, selected, salt)
    except PasswordHashError as error:
        typer.secho(f"Error: {error}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from error
    typer.echo(hashed)


@app.command("algorithms")
def algorithms_command() -> None:
    """List the supported algorithm identifiers."""
    for algorithm in Algorithm:
        typer.echo(algorithm.value)


if __name__ == "__main__":
    app()
