# -*- coding: utf-8 -*-
"""Curated overrides applied on top of the upstream dataset."""

from ..providers.models import ModelOverride, OverrideConfig, ProviderOverride
from .azure import AZURE_MODEL_OVERRIDES
from .cerebras import CEREBRAS_MODEL_OVERRIDES
from .groq import GROQ_MODEL_OVERRIDES

OFFICIAL_PROVIDER_OVERRIDES: list[ProviderOverride] = [
    ProviderOverride(
        value="groq",
        name="Groq",
        website="https://console.groq.com/keys",
        status="active",
    ),
    ProviderOverride(
        value="cerebras",
        name="Cerebras",
        website="https://cloud.cerebras.ai/",
        status="active",
    ),
    ProviderOverride(
        value="azure",
        name="Azure",
        website="https://portal.azure.com/",
        status="active",
    ),
]

OFFICIAL_MODEL_OVERRIDES: list[ModelOverride] = [
    *AZURE_MODEL_OVERRIDES,
    *GROQ_MODEL_OVERRIDES,
    *CEREBRAS_MODEL_OVERRIDES,
]


def official_overrides() -> OverrideConfig:
    """Return the curated overrides as one config."""
    return OverrideConfig(
        providers=list(OFFICIAL_PROVIDER_OVERRIDES),
        models=list(OFFICIAL_MODEL_OVERRIDES),
    )


__all__ = [
    "AZURE_MODEL_OVERRIDES",
    "CEREBRAS_MODEL_OVERRIDES",
    "GROQ_MODEL_OVERRIDES",
    "OFFICIAL_MODEL_OVERRIDES",
    "OFFICIAL_PROVIDER_OVERRIDES",
    "official_overrides",
]
