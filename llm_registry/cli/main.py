# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import os

import click

from ..config import load_config
from ..constant import LOG_LEVEL_ENV
from .query_cmd import providers_cmd, search_cmd, version_cmd
from .registry_cmd import refresh_cmd, serve_cmd

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=lambda: os.environ.get(LOG_LEVEL_ENV, "info").lower(),
    show_default=f"${LOG_LEVEL_ENV} or info",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """LLM model registry: build, serve and query the manifest."""
    log_level = log_level.lower()
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = load_config()
    ctx.obj = {
        "config": config,
        "host": config.server.host,
        "port": config.server.port,
        "log_level": log_level,
    }


cli.add_command(refresh_cmd)
cli.add_command(serve_cmd)
cli.add_command(search_cmd)
cli.add_command(providers_cmd)
cli.add_command(version_cmd)


def main() -> None:
    cli()  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
