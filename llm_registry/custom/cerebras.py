# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import List

from ..providers.models import InheritFrom, Metrics, ModelOverride, Pricing
from ..providers.scoring import score_speed

CEREBRAS_MODEL_OVERRIDES: List[ModelOverride] = [
    # stable
    ModelOverride(
        provider="cerebras",
        value="gpt-oss-120b",
        inherit_from=InheritFrom(provider="openai", value="gpt-oss-120b"),
        pricing=Pricing(input=0.35, output=0.75, blended=0.45),
        speed=score_speed(3000),
        metrics=Metrics(context_window=65_536),
    ),
    ModelOverride(
        provider="cerebras",
        value="llama-3.3-70b",
        inherit_from=InheritFrom(provider="meta", value="llama-3-3-70b"),
        pricing=Pricing(input=0.85, output=1.20, blended=0.9375),
        metrics=Metrics(context_window=65_536),
    ),
    # preview
    ModelOverride(
        provider="cerebras",
        value="qwen-3-235b-a22b-instruct-2507",
        inherit_from=InheritFrom(provider="alibaba", value="qwen3-235b-a22b-2507"),
        status="preview",
        pricing=Pricing(input=0.60, output=1.20, blended=0.75),
        speed=score_speed(1400),
        metrics=Metrics(context_window=65_536),
    ),
    ModelOverride(
        provider="cerebras",
        value="zai-glm-4.7",
        inherit_from=InheritFrom(provider="zai", value="glm-4-7"),
        status="preview",
        pricing=Pricing(input=2.25, output=2.75, blended=2.375),
        speed=score_speed(1000),
        metrics=Metrics(context_window=131_072),
    ),
]
