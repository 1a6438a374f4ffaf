# -*- coding: utf-8 -*-
"""Canonical ordering and content-derived version/ETag for the manifest."""

from __future__ import annotations

import hashlib
import json
from datetime import datetime, timezone
from typing import Iterable, List, NamedTuple, Optional, Tuple

from .models import Manifest, Model, Provider

ETAG_LENGTH = 32
VERSION_LENGTH = 12
VERSION_PREFIX = "v1."


class ManifestTags(NamedTuple):
    etag: str
    version: str


def _provider_sort_key(provider: Provider) -> Tuple[str, str, str]:
    # casefold first for a human ordering, raw name and slug make it total
    return (provider.name.casefold(), provider.name, provider.value)


def _model_sort_key(model: Model) -> Tuple[str, str]:
    return (model.provider, model.value)


def sort_providers(providers: Iterable[Provider]) -> List[Provider]:
    """Order providers by display name."""
    return sorted(providers, key=_provider_sort_key)


def sort_models(models: Iterable[Model]) -> List[Model]:
    """Order models by ``(provider, value)``."""
    return sorted(models, key=_model_sort_key)


def to_canonical(
    providers: Iterable[Provider],
    models: Iterable[Model],
) -> Tuple[List[Provider], List[Model]]:
    """Sorted deep copies; nested objects are fresh copies or absent."""
    return (
        sort_providers(p.model_copy(deep=True) for p in providers),
        sort_models(m.model_copy(deep=True) for m in models),
    )


def canonical_bytes(
    providers: Iterable[Provider],
    models: Iterable[Model],
) -> bytes:
    """Serialize the canonical ``{providers, models}`` pair for hashing.

    Keys are emitted in the field order declared on the pydantic models,
    so the bytes do not depend on the key order of whatever input the
    records were parsed from. Absent fields are dropped, never ``null``.
    """
    canonical_providers, canonical_models = to_canonical(providers, models)
    payload = {
        "providers": [p.to_json_dict() for p in canonical_providers],
        "models": [m.to_json_dict() for m in canonical_models],
    }
    return json.dumps(
        payload,
        ensure_ascii=False,
        separators=(",", ":"),
    ).encode("utf-8")


def create_manifest_tags(
    providers: Iterable[Provider],
    models: Iterable[Model],
) -> ManifestTags:
    """Derive the strong ETag and version from manifest content."""
    digest = hashlib.sha256(canonical_bytes(providers, models)).hexdigest()
    return ManifestTags(
        etag=f'"{digest[:ETAG_LENGTH]}"',
        version=f"{VERSION_PREFIX}{digest[:VERSION_LENGTH]}",
    )


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO 8601 UTC timestamp with millisecond precision, e.g. ``...123Z``."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_manifest(
    providers: Iterable[Provider],
    models: Iterable[Model],
    generated_at: Optional[str] = None,
) -> Manifest:
    """Seal a resolved dataset into a manifest.

    ``version`` and ``etag`` depend only on providers and models, so a
    rerun over unchanged data yields the same tags with a new
    ``generatedAt``.
    """
    sorted_providers, sorted_models = to_canonical(providers, models)
    tags = create_manifest_tags(sorted_providers, sorted_models)
    return Manifest(
        version=tags.version,
        etag=tags.etag,
        generated_at=generated_at or utc_timestamp(),
        providers=sorted_providers,
        models=sorted_models,
    )
