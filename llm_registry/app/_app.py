# -*- coding: utf-8 -*-
"""FastAPI application factory."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from fastapi import FastAPI

from .. import __version__
from ..config import Config, get_store_dir, load_config
from ..constant import (
    AA_API_KEY_ENV,
    DOCS_ENABLED,
    get_api_key,
    get_cron_auth_token,
)
from ..exceptions import ConfigError
from ..providers import (
    ArtificialAnalysisSource,
    FileManifestStore,
    Manifest,
    RefreshResult,
    load_manifest,
)
from ..refresh import run_refresh
from .routers import registry_router, system_router

logger = logging.getLogger(__name__)

API_DESCRIPTION = (
    "Model metadata aggregated from Artificial Analysis with curated "
    "corrections. Manifest-derived endpoints share one ETag; send it back "
    "in If-None-Match to get a 304 when nothing changed."
)


def create_app(
    load_manifest_fn: Callable[[], Manifest],
    run_refresh_fn: Optional[Callable[[], RefreshResult]] = None,
    get_cron_token: Optional[Callable[[], Optional[str]]] = None,
    config: Optional[Config] = None,
    docs_enabled: Optional[bool] = None,
) -> FastAPI:
    """Build the API around its collaborators.

    ``load_manifest_fn`` reads the published manifest (raising the storage
    errors from :mod:`llm_registry.exceptions`); ``run_refresh_fn`` and
    ``get_cron_token`` enable ``POST /cron/trigger`` when both are given.
    ``docs_enabled`` defaults to ``DOCS_ENABLED``.
    """
    if config is None:
        config = Config()
    if docs_enabled is None:
        docs_enabled = DOCS_ENABLED

    app = FastAPI(
        title="LLM Registry API",
        version=__version__,
        description=API_DESCRIPTION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.load_manifest = load_manifest_fn
    app.state.run_refresh = run_refresh_fn
    app.state.get_cron_token = get_cron_token
    app.state.cache_control = config.cache.header_value()

    app.include_router(registry_router)
    app.include_router(system_router)
    return app


def create_default_app(config: Optional[Config] = None) -> FastAPI:
    """App wired to the file store and the Artificial Analysis source."""
    if config is None:
        config = load_config()
    store = FileManifestStore(get_store_dir(config))

    def _refresh() -> RefreshResult:
        api_key = get_api_key()
        if not api_key:
            raise ConfigError(f"{AA_API_KEY_ENV} is not set")
        source = ArtificialAnalysisSource(
            api_key,
            url=config.upstream.url,
            timeout=config.upstream.timeout,
        )
        return run_refresh(source, store, strict=config.strict_overrides)

    logger.info("Serving manifest from %s", store.directory)
    return create_app(
        lambda: load_manifest(store),
        run_refresh_fn=_refresh,
        get_cron_token=get_cron_auth_token,
        config=config,
    )
