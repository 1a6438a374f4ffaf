# -*- coding: utf-8 -*-
"""ETag / If-None-Match negotiation for manifest-derived responses.

Every endpoint serving manifest data shares the manifest's single ETag
and one Cache-Control policy, so one validator covers all of them.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Request, Response

WILDCARD = "*"
WEAK_PREFIX = "W/"


def normalize_etag_value(etag: str) -> str:
    """Reduce a validator to its comparable core.

    ``W/"abc"``, ``"abc"`` and ``abc`` all normalize to ``abc``; a lone
    ``*`` stays ``*``.
    """
    trimmed = etag.strip()
    if trimmed == WILDCARD:
        return WILDCARD
    if trimmed.startswith(WEAK_PREFIX):
        trimmed = trimmed[len(WEAK_PREFIX):]
    return trimmed.strip('"')


def etag_matches(if_none_match: Optional[str], current_etag: str) -> bool:
    """True if any listed validator is ``*`` or matches *current_etag*."""
    if not if_none_match:
        return False
    current = normalize_etag_value(current_etag)
    for candidate in if_none_match.split(","):
        candidate = candidate.strip()
        if not candidate:
            continue
        if candidate == WILDCARD or normalize_etag_value(candidate) == current:
            return True
    return False


def caching_headers(etag: str, cache_control: str) -> dict[str, str]:
    return {"Cache-Control": cache_control, "ETag": etag}


def apply_caching_headers(
    response: Response,
    etag: str,
    cache_control: str,
) -> None:
    response.headers.update(caching_headers(etag, cache_control))


def not_modified(etag: str, cache_control: str) -> Response:
    """304 with no body; validators are re-asserted for downstream caches."""
    return Response(
        status_code=304,
        headers=caching_headers(etag, cache_control),
    )


def handle_conditional_request(
    request: Request,
    response: Response,
    etag: str,
    cache_control: str,
) -> Optional[Response]:
    """Set caching headers and return a 304 response if the client is current.

    Returns None when the caller should send the full 200 body.
    """
    if etag_matches(request.headers.get("if-none-match"), etag):
        return not_modified(etag, cache_control)
    apply_caching_headers(response, etag, cache_control)
    return None
