# -*- coding: utf-8 -*-
"""CLI commands that build and serve the manifest locally."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ..config import Config, get_store_dir
from ..constant import AA_API_KEY_ENV
from ..exceptions import RegistryError
from ..providers import ArtificialAnalysisSource, FileManifestStore
from ..refresh import resolve_manifest, run_refresh


def _config(ctx: click.Context) -> Config:
    return (ctx.obj or {}).get("config") or Config()


@click.command("refresh")
@click.option(
    "--api-key",
    envvar=AA_API_KEY_ENV,
    default=None,
    help=f"Artificial Analysis API key (env: {AA_API_KEY_ENV})",
)
@click.option(
    "--store-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory the manifest is published to",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail on inheritFrom references to unknown models",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Resolve and print the version without publishing",
)
@click.pass_context
def refresh_cmd(
    ctx: click.Context,
    api_key: Optional[str],
    store_dir: Optional[Path],
    strict: Optional[bool],
    dry_run: bool,
) -> None:
    """Fetch upstream data, apply overrides and publish the manifest."""
    config = _config(ctx)
    if not api_key:
        raise click.ClickException(f"{AA_API_KEY_ENV} is not set")
    if strict is None:
        strict = config.strict_overrides

    source = ArtificialAnalysisSource(
        api_key,
        url=config.upstream.url,
        timeout=config.upstream.timeout,
    )
    try:
        if dry_run:
            manifest = resolve_manifest(source, strict=strict)
            click.echo(
                f"{manifest.version} {manifest.etag} "
                f"({len(manifest.providers)} providers, "
                f"{len(manifest.models)} models) [not published]",
            )
            return
        store = FileManifestStore(store_dir or get_store_dir(config))
        result = run_refresh(source, store, strict=strict)
    except RegistryError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(
        f"✓ {result.version}: {result.providers} providers, "
        f"{result.models} models",
    )


@click.command("serve")
@click.option("--host", default=None, help="Bind address")
@click.option("--port", type=int, default=None, help="Bind port")
@click.pass_context
def serve_cmd(
    ctx: click.Context,
    host: Optional[str],
    port: Optional[int],
) -> None:
    """Serve the published manifest over HTTP."""
    import uvicorn

    from ..app import create_default_app

    config = _config(ctx)
    uvicorn.run(
        create_default_app(config),
        host=host or config.server.host,
        port=port or config.server.port,
        log_level=(ctx.obj or {}).get("log_level", "info"),
    )
