# -*- coding: utf-8 -*-
"""API routes serving the manifest, providers and models."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Path, Query, Request, Response

from ...exceptions import ManifestCorruptError, ManifestNotFoundError
from ...providers import (
    Manifest,
    Model,
    ModelSearchQuery,
    Provider,
    VersionInfo,
    filter_models,
    parse_score,
)
from ..conditional import apply_caching_headers, handle_conditional_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1")

_NOT_MODIFIED = {304: {"description": "Not modified (If-None-Match hit)"}}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_manifest(request: Request) -> Manifest:
    """Load the current manifest, mapping storage faults to 503."""
    try:
        return request.app.state.load_manifest()
    except ManifestNotFoundError as exc:
        raise HTTPException(
            status_code=503,
            detail="Manifest not initialized",
        ) from exc
    except ManifestCorruptError as exc:
        logger.error("Cannot serve stored manifest: %s", exc)
        raise HTTPException(
            status_code=503,
            detail="Stored manifest is unreadable",
        ) from exc


def _cache_control(request: Request) -> str:
    return request.app.state.cache_control


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get(
    "/manifest",
    response_model=Manifest,
    response_model_exclude_none=True,
    responses=_NOT_MODIFIED,
    tags=["Registry"],
    summary="Get complete manifest",
    description="All providers and models with version metadata. "
    "Supports If-None-Match.",
)
async def get_manifest(request: Request, response: Response):
    manifest = _load_manifest(request)
    cached = handle_conditional_request(
        request,
        response,
        manifest.etag,
        _cache_control(request),
    )
    if cached is not None:
        return cached
    return manifest


@router.get(
    "/providers",
    response_model=List[Provider],
    response_model_exclude_none=True,
    responses=_NOT_MODIFIED,
    tags=["Providers"],
    summary="List all providers",
)
async def list_providers(request: Request, response: Response):
    manifest = _load_manifest(request)
    cached = handle_conditional_request(
        request,
        response,
        manifest.etag,
        _cache_control(request),
    )
    if cached is not None:
        return cached
    return manifest.providers


@router.get(
    "/providers/{provider_id}/models",
    response_model=List[Model],
    response_model_exclude_none=True,
    responses=_NOT_MODIFIED,
    tags=["Models"],
    summary="Get models by provider",
    description="Models of one provider; unknown providers yield [].",
)
async def list_provider_models(
    request: Request,
    response: Response,
    provider_id: str = Path(
        ...,
        description='Provider slug (e.g. "openai", "anthropic")',
    ),
):
    manifest = _load_manifest(request)
    cached = handle_conditional_request(
        request,
        response,
        manifest.etag,
        _cache_control(request),
    )
    if cached is not None:
        return cached
    return [m for m in manifest.models if m.provider == provider_id]


@router.get(
    "/models/search",
    response_model=List[Model],
    response_model_exclude_none=True,
    tags=["Models"],
    summary="Search models",
    description="Repeat a parameter to match any of its values; "
    "different parameters must all match. Invalid numbers are ignored.",
)
async def search_models(
    request: Request,
    response: Response,
    name: Optional[List[str]] = Query(
        None,
        description="Partial match on model name, value or alias",
    ),
    provider: Optional[List[str]] = Query(None, description="Provider slug"),
    capability: Optional[List[str]] = Query(
        None,
        description="Require every listed capability",
    ),
    status: Optional[List[str]] = Query(None),
    release_date_from: Optional[str] = Query(
        None,
        alias="releaseDateFrom",
        description="Released on/after this ISO date",
    ),
    release_date_to: Optional[str] = Query(
        None,
        alias="releaseDateTo",
        description="Released on/before this ISO date",
    ),
    min_iq: Optional[str] = Query(None, alias="minIq"),
    min_speed: Optional[str] = Query(None, alias="minSpeed"),
    min_context_window: Optional[str] = Query(
        None,
        alias="minContextWindow",
    ),
    mode: Optional[str] = Query(None, description="auto, json or tool"),
) -> List[Model]:
    manifest = _load_manifest(request)
    apply_caching_headers(response, manifest.etag, _cache_control(request))

    query = ModelSearchQuery(
        name=name,
        provider=provider,
        capability=capability,
        status=status,
        release_date_from=release_date_from,
        release_date_to=release_date_to,
        min_iq=parse_score(min_iq),
        min_speed=parse_score(min_speed),
        min_context_window=parse_score(min_context_window),
        mode=mode,
    )
    return filter_models(manifest.models, query)


@router.get(
    "/version",
    response_model=VersionInfo,
    responses=_NOT_MODIFIED,
    tags=["System"],
    summary="Get version info",
)
async def get_version(request: Request, response: Response):
    manifest = _load_manifest(request)
    cached = handle_conditional_request(
        request,
        response,
        manifest.etag,
        _cache_control(request),
    )
    if cached is not None:
        return cached
    return VersionInfo(
        version=manifest.version,
        etag=manifest.etag,
        generated_at=manifest.generated_at,
    )
