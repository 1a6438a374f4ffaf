# -*- coding: utf-8 -*-
"""Refresh job: fetch the base dataset, resolve, seal and publish."""

from __future__ import annotations

import logging
from typing import Optional

from .constant import MANIFEST_KEY
from .custom import official_overrides
from .exceptions import RegistryError
from .providers.canonical import build_manifest
from .providers.models import Manifest, OverrideConfig, RefreshResult
from .providers.resolver import apply_overrides
from .providers.store import ManifestStore, save_manifest
from .providers.transform import BaseDatasetSource

logger = logging.getLogger(__name__)


def resolve_manifest(
    source: BaseDatasetSource,
    overrides: Optional[OverrideConfig] = None,
    *,
    strict: bool = False,
) -> Manifest:
    """Fetch and resolve a manifest without publishing it.

    Either returns a complete manifest or raises; nothing is written.
    """
    if overrides is None:
        overrides = official_overrides()
    base_providers, base_models = source.fetch()
    providers, models = apply_overrides(
        base_providers,
        base_models,
        overrides,
        strict=strict,
    )
    return build_manifest(providers, models)


def run_refresh(
    source: BaseDatasetSource,
    store: ManifestStore,
    overrides: Optional[OverrideConfig] = None,
    *,
    strict: bool = False,
    key: str = MANIFEST_KEY,
) -> RefreshResult:
    """Run one refresh cycle and publish the result.

    The store is only written after a manifest has been fully built, so a
    failed run leaves the previously published manifest in place.
    """
    try:
        manifest = resolve_manifest(source, overrides, strict=strict)
        save_manifest(store, manifest, key)
    except RegistryError as exc:
        logger.error("Failed to update manifest: %s", exc)
        raise

    logger.info(
        "Manifest updated successfully: version=%s providers=%d "
        "models=%d generatedAt=%s",
        manifest.version,
        len(manifest.providers),
        len(manifest.models),
        manifest.generated_at,
    )
    return RefreshResult(
        success=True,
        version=manifest.version,
        providers=len(manifest.providers),
        models=len(manifest.models),
        generated_at=manifest.generated_at,
    )
