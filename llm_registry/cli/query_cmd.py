# -*- coding: utf-8 -*-
"""CLI commands for querying a running registry over HTTP (/v1)."""
from __future__ import annotations

from typing import Optional, Tuple

import click

from .http import client, print_json, raise_for_api_error, resolve_base_url


@click.command("search")
@click.option("--name", multiple=True, help="Partial name/value/alias match")
@click.option("--provider", multiple=True, help="Provider slug, e.g. openai")
@click.option(
    "--capability",
    multiple=True,
    help="Required capability (repeat to require several)",
)
@click.option("--status", multiple=True, help="latest / preview / all")
@click.option("--from", "release_from", default=None, help="Released on/after")
@click.option("--to", "release_to", default=None, help="Released on/before")
@click.option("--min-iq", default=None, help="Minimum IQ score (0-5)")
@click.option("--min-speed", default=None, help="Minimum speed score (0-5)")
@click.option("--min-context", default=None, help="Minimum context window")
@click.option("--mode", default=None, help="auto / json / tool")
@click.option("--base-url", default=None, help="Override the API address")
@click.pass_context
def search_cmd(
    ctx: click.Context,
    name: Tuple[str, ...],
    provider: Tuple[str, ...],
    capability: Tuple[str, ...],
    status: Tuple[str, ...],
    release_from: Optional[str],
    release_to: Optional[str],
    min_iq: Optional[str],
    min_speed: Optional[str],
    min_context: Optional[str],
    mode: Optional[str],
    base_url: Optional[str],
) -> None:
    """Search models.

    \b
    Examples:
      llm-registry search --provider openai --provider anthropic
      llm-registry search --capability reasoning --capability vision
      llm-registry search --name gpt --min-iq 4
    """
    params: list[tuple[str, str]] = []
    params += [("name", v) for v in name]
    params += [("provider", v) for v in provider]
    params += [("capability", v) for v in capability]
    params += [("status", v) for v in status]
    for key, value in (
        ("releaseDateFrom", release_from),
        ("releaseDateTo", release_to),
        ("minIq", min_iq),
        ("minSpeed", min_speed),
        ("minContextWindow", min_context),
        ("mode", mode),
    ):
        if value is not None:
            params.append((key, value))

    with client(resolve_base_url(ctx, base_url)) as c:
        r = c.get("/v1/models/search", params=params)
        raise_for_api_error(r)
        print_json(r.json())


@click.command("providers")
@click.argument("provider_id", required=False, default=None)
@click.option("--base-url", default=None, help="Override the API address")
@click.pass_context
def providers_cmd(
    ctx: click.Context,
    provider_id: Optional[str],
    base_url: Optional[str],
) -> None:
    """List providers, or the models of PROVIDER_ID."""
    path = (
        f"/v1/providers/{provider_id}/models"
        if provider_id
        else "/v1/providers"
    )
    with client(resolve_base_url(ctx, base_url)) as c:
        r = c.get(path)
        raise_for_api_error(r)
        print_json(r.json())


@click.command("version")
@click.option(
    "--etag",
    default=None,
    help="Send as If-None-Match; prints 'not modified' on a match",
)
@click.option("--base-url", default=None, help="Override the API address")
@click.pass_context
def version_cmd(
    ctx: click.Context,
    etag: Optional[str],
    base_url: Optional[str],
) -> None:
    """Show the published manifest version."""
    headers = {"If-None-Match": etag} if etag else {}
    with client(resolve_base_url(ctx, base_url)) as c:
        r = c.get("/v1/version", headers=headers)
        if r.status_code == 304:
            click.echo(f"not modified ({r.headers.get('etag', etag)})")
            return
        raise_for_api_error(r)
        print_json(r.json())
