# -*- coding: utf-8 -*-
"""Health check and manual refresh trigger."""

from __future__ import annotations

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Header, HTTPException, Query, Request
from starlette.concurrency import run_in_threadpool

from ...exceptions import RegistryError
from ...providers.models import HealthInfo, RefreshResult

logger = logging.getLogger(__name__)

router = APIRouter(tags=["System"])


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if authorization and authorization.startswith("Bearer "):
        return authorization[len("Bearer "):]
    return None


@router.get("/health", response_model=HealthInfo, summary="Health check")
async def health() -> HealthInfo:
    return HealthInfo()


@router.post(
    "/cron/trigger",
    response_model=RefreshResult,
    summary="Trigger a refresh manually",
    description="Authenticate with 'Authorization: Bearer <token>' "
    "or the 'token' query parameter.",
)
async def trigger_refresh(
    request: Request,
    token: Optional[str] = Query(
        None,
        description="Auth token (alternative to Authorization header)",
    ),
    authorization: Optional[str] = Header(None),
) -> RefreshResult:
    state = request.app.state
    if state.run_refresh is None or state.get_cron_token is None:
        raise HTTPException(status_code=501, detail="Not implemented")

    supplied = _bearer_token(authorization) or token
    expected = state.get_cron_token()
    if not expected or not supplied or not secrets.compare_digest(
        supplied.encode("utf-8"),
        expected.encode("utf-8"),
    ):
        raise HTTPException(status_code=401, detail="Unauthorized")

    try:
        return await run_in_threadpool(state.run_refresh)
    except RegistryError as exc:
        logger.error("Manual refresh failed: %s", exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
