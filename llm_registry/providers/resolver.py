# -*- coding: utf-8 -*-
"""Merge a base dataset with curated provider and model overrides.

Provider overrides update existing providers or add new ones. Model
overrides can:

- update an existing model (same provider/value),
- add a brand new model,
- clone an existing model via ``inheritFrom`` and attach it to another
  provider, e.g. a lab model hosted by an inference provider.

Every set field of an override is an independent patch; an unset field
never erases existing data. Overrides apply in list order, so the last
one targeting a key wins per field.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..exceptions import OverrideResolutionError
from .models import (
    Metrics,
    Model,
    ModelOverride,
    OverrideConfig,
    Provider,
    ProviderOverride,
    model_key,
)

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_STATUS = "active"


def clone_model(model: Model) -> Model:
    """Copy a model so nested objects are never shared between entries."""
    return model.model_copy(deep=True)


def custom_model_id(provider: str, value: str) -> str:
    return f"custom:{provider}:{value}"


def default_alias(name: str) -> Optional[str]:
    """Short display name: everything before the first '('."""
    return name.split("(")[0].strip() or None


# ---------------------------------------------------------------------------
# Providers
# ---------------------------------------------------------------------------


def _apply_provider_override(
    existing: Optional[Provider],
    override: ProviderOverride,
) -> Provider:
    if existing is None:
        return Provider(
            value=override.value,
            name=override.name if override.name is not None else override.value,
            key_placeholder=override.key_placeholder,
            website=override.website,
            status=(
                override.status
                if override.status is not None
                else DEFAULT_PROVIDER_STATUS
            ),
        )

    provider = existing.model_copy()
    if override.name is not None:
        provider.name = override.name
    if override.key_placeholder is not None:
        provider.key_placeholder = override.key_placeholder
    if override.website is not None:
        provider.website = override.website
    if override.status is not None:
        provider.status = override.status
    return provider


def resolve_providers(
    base_providers: Iterable[Provider],
    overrides: Iterable[ProviderOverride],
) -> List[Provider]:
    provider_map: Dict[str, Provider] = {}
    for provider in base_providers:
        provider_map[provider.value] = provider.model_copy()

    for override in overrides:
        provider_map[override.value] = _apply_provider_override(
            provider_map.get(override.value),
            override,
        )
    return list(provider_map.values())


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


def _starting_model(
    override: ModelOverride,
    existing: Optional[Model],
    base_index: Dict[str, Model],
    strict: bool,
) -> Model:
    """Pick the model an override is applied to (before field patches)."""
    target = model_key(override.provider, override.value)

    if override.inherit_from is not None:
        source_key = model_key(
            override.inherit_from.provider,
            override.inherit_from.value,
        )
        inherited = base_index.get(source_key)
        if inherited is not None:
            model = clone_model(inherited)
            model.provider = override.provider
            model.value = override.value
            model.id = (
                override.id
                if override.id is not None
                else custom_model_id(override.provider, override.value)
            )
            return model

        if strict:
            raise OverrideResolutionError(
                target,
                f"inheritFrom '{source_key}' does not match any base model",
            )
        logger.warning(
            "Override %s inherits from unknown model %s; "
            "building it without inheritance",
            target,
            source_key,
        )

    if existing is not None:
        model = clone_model(existing)
        if override.id is not None:
            model.id = override.id
        return model

    name = override.name if override.name is not None else override.value
    return Model(
        id=(
            override.id
            if override.id is not None
            else custom_model_id(override.provider, override.value)
        ),
        provider=override.provider,
        value=override.value,
        name=name,
        alias=override.alias if override.alias is not None else default_alias(name),
    )


def _patch_model(model: Model, override: ModelOverride) -> Model:
    """Apply every set field of *override* on top of *model* in place."""
    if override.name is not None:
        model.name = override.name
    if override.alias is not None:
        model.alias = override.alias
    if override.capabilities is not None:
        model.capabilities = override.capabilities.model_copy()
    if override.iq is not None:
        model.iq = override.iq
    if override.speed is not None:
        model.speed = override.speed
    if override.metrics is not None:
        current = model.metrics or Metrics()
        model.metrics = current.model_copy(
            update=override.metrics.model_dump(exclude_none=True),
        )
    if override.pricing is not None:
        model.pricing = override.pricing.model_copy()
    if override.release_date is not None:
        model.release_date = override.release_date
    if override.status is not None:
        model.status = override.status
    if override.config is not None:
        model.config = override.config.model_copy()
    return model


def resolve_models(
    base_models: Iterable[Model],
    overrides: Iterable[ModelOverride],
    *,
    strict: bool = False,
) -> List[Model]:
    # inheritFrom always reads the untouched base models, never an entry
    # already patched by an earlier override.
    base_index: Dict[str, Model] = {}
    models_map: Dict[str, Model] = {}
    for model in base_models:
        base_index[model.key] = model
        models_map[model.key] = clone_model(model)

    for override in overrides:
        key = model_key(override.provider, override.value)
        model = _starting_model(
            override,
            models_map.get(key),
            base_index,
            strict,
        )
        models_map[key] = _patch_model(model, override)
    return list(models_map.values())


def apply_overrides(
    base_providers: Iterable[Provider],
    base_models: Iterable[Model],
    overrides: Optional[OverrideConfig] = None,
    *,
    strict: bool = False,
) -> Tuple[List[Provider], List[Model]]:
    """Apply provider and model overrides to a base dataset.

    Returns ``(providers, models)`` in map insertion order; callers seal
    them with :func:`~llm_registry.providers.canonical.build_manifest`.
    Inputs are left untouched.
    """
    if overrides is None:
        overrides = OverrideConfig()
    providers = resolve_providers(base_providers, overrides.providers)
    models = resolve_models(base_models, overrides.models, strict=strict)
    return providers, models
