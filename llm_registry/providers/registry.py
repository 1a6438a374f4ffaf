# -*- coding: utf-8 -*-
"""Built-in provider definitions and the curated model registry."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .models import Capabilities, ModelStatus, Provider

# ---------------------------------------------------------------------------
# Known providers (keyed by upstream creator slug)
# ---------------------------------------------------------------------------

PROVIDER_OPENAI = Provider(
    value="openai",
    name="OpenAI",
    key_placeholder="sk-...",
    website="https://platform.openai.com/api-keys",
)

PROVIDER_ANTHROPIC = Provider(
    value="anthropic",
    name="Anthropic",
    key_placeholder="sk-ant-...",
    website="https://console.anthropic.com/settings/keys",
)

PROVIDER_GOOGLE = Provider(
    value="google",
    name="Google",
    key_placeholder="AI...",
    website="https://aistudio.google.com/app/apikey",
)

PROVIDER_MISTRAL = Provider(
    value="mistral",
    name="Mistral",
    website="https://console.mistral.ai/api-keys/",
)

PROVIDER_XAI = Provider(
    value="xai",
    name="xAI",
    website="https://console.x.ai/",
)

PROVIDER_DEEPSEEK = Provider(
    value="deepseek",
    name="DeepSeek",
    website="https://platform.deepseek.com/api_keys",
)

PROVIDER_COHERE = Provider(
    value="cohere",
    name="Cohere",
    website="https://dashboard.cohere.com/api-keys",
)

PROVIDER_META = Provider(value="meta", name="Meta")

# Registry: upstream creator slug -> Provider. The slug differs from the
# provider value only for xAI.
PROVIDERS: dict[str, Provider] = {
    "openai": PROVIDER_OPENAI,
    "anthropic": PROVIDER_ANTHROPIC,
    "google": PROVIDER_GOOGLE,
    "mistral": PROVIDER_MISTRAL,
    "x-ai": PROVIDER_XAI,
    "deepseek": PROVIDER_DEEPSEEK,
    "cohere": PROVIDER_COHERE,
    "meta": PROVIDER_META,
}

_PROVIDERS_BY_VALUE: dict[str, Provider] = {
    p.value: p for p in PROVIDERS.values()
}


def get_provider(provider_id: str) -> Optional[Provider]:
    """Return a provider by creator slug or provider value, or None."""
    return PROVIDERS.get(provider_id) or _PROVIDERS_BY_VALUE.get(provider_id)


def list_providers() -> List[Provider]:
    """Return all built-in provider definitions."""
    return list(PROVIDERS.values())


def provider_value_for(creator_slug: str) -> str:
    """Map an upstream creator slug to the provider value we publish."""
    known = PROVIDERS.get(creator_slug)
    return known.value if known else creator_slug


# ---------------------------------------------------------------------------
# Model registry (loaded from model_registry.json)
# ---------------------------------------------------------------------------


class ModelRegistryEntry(BaseModel):
    """Curated facts about one ``(provider, value)`` pair."""

    status: ModelStatus = "latest"
    context_window: int
    capabilities: Capabilities


_REGISTRY_JSON = Path(__file__).resolve().parent / "model_registry.json"


def get_model_registry_path() -> Path:
    """Return the path of the bundled registry table."""
    return _REGISTRY_JSON


def load_model_registry(
    path: Optional[Path] = None,
) -> Dict[str, Dict[str, ModelRegistryEntry]]:
    """Load the registry table into a mapping of mappings.

    Each entry in the file lists capability keys; the loader expands them
    into a full flag set where unlisted flags are False.
    """
    if path is None:
        path = get_model_registry_path()
    with open(path, "r", encoding="utf-8") as fh:
        raw: dict = json.load(fh)

    table: Dict[str, Dict[str, ModelRegistryEntry]] = {}
    for provider, models in raw.items():
        group = table.setdefault(provider, {})
        for value, entry in models.items():
            group[value] = ModelRegistryEntry(
                status=entry.get("status", "latest"),
                context_window=entry["contextWindow"],
                capabilities=Capabilities.from_keys(*entry["capabilities"]),
            )
    return table


MODEL_REGISTRY: Dict[str, Dict[str, ModelRegistryEntry]] = load_model_registry()


def get_model_registry(
    provider: str,
    value: str,
) -> Optional[ModelRegistryEntry]:
    """Return the registry entry for a model, or None if not curated."""
    return MODEL_REGISTRY.get(provider, {}).get(value)
