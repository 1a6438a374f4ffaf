# -*- coding: utf-8 -*-
"""Providers and models: data model, registry, resolution, search, store."""

from .canonical import (
    ManifestTags,
    build_manifest,
    create_manifest_tags,
    sort_models,
    sort_providers,
    to_canonical,
)
from .models import (
    CAPABILITY_KEYS,
    Capabilities,
    InheritFrom,
    Manifest,
    Metrics,
    Model,
    ModelConfig,
    ModelOverride,
    OverrideConfig,
    Pricing,
    Provider,
    ProviderOverride,
    RefreshResult,
    VersionInfo,
)
from .registry import (
    MODEL_REGISTRY,
    PROVIDERS,
    get_model_registry,
    get_provider,
    list_providers,
)
from .resolver import apply_overrides
from .scoring import score_iq, score_speed
from .search import ModelSearchQuery, filter_models, parse_score
from .store import (
    FileManifestStore,
    ManifestStore,
    MemoryManifestStore,
    load_manifest,
    save_manifest,
)
from .transform import ArtificialAnalysisSource, BaseDatasetSource

__all__ = [
    # models
    "CAPABILITY_KEYS",
    "Capabilities",
    "InheritFrom",
    "Manifest",
    "Metrics",
    "Model",
    "ModelConfig",
    "ModelOverride",
    "OverrideConfig",
    "Pricing",
    "Provider",
    "ProviderOverride",
    "RefreshResult",
    "VersionInfo",
    # registry
    "MODEL_REGISTRY",
    "PROVIDERS",
    "get_model_registry",
    "get_provider",
    "list_providers",
    # resolution
    "apply_overrides",
    "score_iq",
    "score_speed",
    # canonical
    "ManifestTags",
    "build_manifest",
    "create_manifest_tags",
    "sort_models",
    "sort_providers",
    "to_canonical",
    # search
    "ModelSearchQuery",
    "filter_models",
    "parse_score",
    # store
    "FileManifestStore",
    "ManifestStore",
    "MemoryManifestStore",
    "load_manifest",
    "save_manifest",
    # upstream
    "ArtificialAnalysisSource",
    "BaseDatasetSource",
]
