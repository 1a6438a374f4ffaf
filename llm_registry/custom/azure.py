# -*- coding: utf-8 -*-
"""Azure AI Foundry deployments of lab models."""

from __future__ import annotations

from typing import List

from ..providers.models import InheritFrom, ModelOverride


def _hosted(value: str, provider: str, source: str, **fields) -> ModelOverride:
    return ModelOverride(
        provider="azure",
        value=value,
        inherit_from=InheritFrom(provider=provider, value=source),
        **fields,
    )


AZURE_MODEL_OVERRIDES: List[ModelOverride] = [
    _hosted("DeepSeek-V3.1", "deepseek", "deepseek-v3-1-terminus"),
    _hosted("gpt-5-mini", "openai", "gpt-5-mini"),
    _hosted("gpt-5-nano", "openai", "gpt-5-nano"),
    _hosted("gpt-5.1", "openai", "gpt-5-1"),
    _hosted("gpt-5.1-codex", "openai", "gpt-5-codex"),
    ModelOverride(provider="azure", value="gpt-5-pro", name="GPT-5 Pro"),
    _hosted("gpt-oss-120b", "openai", "gpt-oss-120b"),
    _hosted("grok-4-fast-non-reasoning", "xai", "grok-4-fast"),
    _hosted("grok-4-fast-reasoning", "xai", "grok-4-fast-reasoning"),
    _hosted("model-router", "openai", "gpt-5-1", name="Model Router"),
]
