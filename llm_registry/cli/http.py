# -*- coding: utf-8 -*-
from __future__ import annotations

import json
from typing import Any, Optional

import click
import httpx


DEFAULT_BASE_URL = "http://127.0.0.1:8787"


def client(base_url: str) -> httpx.Client:
    return httpx.Client(base_url=base_url.rstrip("/"), timeout=30.0)


def print_json(data: Any) -> None:
    click.echo(json.dumps(data, ensure_ascii=False, indent=2))


def resolve_base_url(ctx: click.Context, base_url: Optional[str]) -> str:
    """Resolve base_url with priority:
    1) command --base-url
    2) server host/port from config.json (resolved in main.py)
    3) DEFAULT_BASE_URL
    """
    if base_url:
        return base_url.rstrip("/")
    obj = ctx.obj or {}
    if "host" not in obj or "port" not in obj:
        return DEFAULT_BASE_URL
    return f"http://{obj['host']}:{obj['port']}"


def error_detail(r: httpx.Response, default: str) -> str:
    """Return the API's ``detail`` field, or the raw body if not JSON."""
    try:
        body = r.json()
    except ValueError:
        return r.text.strip() or default
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return default


def raise_for_api_error(r: httpx.Response) -> None:
    """Turn API error responses into a readable ClickException."""
    if r.status_code == 503:
        detail = error_detail(r, "service unavailable")
        raise click.ClickException(f"registry unavailable: {detail}")
    if r.is_error:
        detail = error_detail(r, r.reason_phrase)
        raise click.ClickException(f"HTTP {r.status_code}: {detail}")
