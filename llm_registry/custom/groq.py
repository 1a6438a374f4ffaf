# -*- coding: utf-8 -*-
"""Groq-hosted models. Prices are USD per 1M tokens."""

from __future__ import annotations

from typing import List

from ..providers.models import InheritFrom, Metrics, ModelOverride, Pricing
from ..providers.scoring import score_speed

GROQ_MODEL_OVERRIDES: List[ModelOverride] = [
    # stable
    ModelOverride(
        provider="groq",
        value="llama-3.3-70b-versatile",
        inherit_from=InheritFrom(provider="meta", value="llama-3-3-70b"),
        pricing=Pricing(input=0.59, output=0.79, blended=0.64),
        speed=score_speed(280),
        metrics=Metrics(context_window=131_072),
    ),
    ModelOverride(
        provider="groq",
        value="openai/gpt-oss-120b",
        inherit_from=InheritFrom(provider="openai", value="gpt-oss-120b"),
        pricing=Pricing(input=0.15, output=0.60, blended=0.2625),
        speed=score_speed(500),
        metrics=Metrics(context_window=131_072),
    ),
    ModelOverride(
        provider="groq",
        value="openai/gpt-oss-20b",
        inherit_from=InheritFrom(provider="openai", value="gpt-oss-20b"),
        pricing=Pricing(input=0.075, output=0.30, blended=0.13125),
        speed=score_speed(1000),
        metrics=Metrics(context_window=131_072),
    ),
    # preview
    ModelOverride(
        provider="groq",
        value="meta-llama/llama-4-maverick-17b-128e-instruct",
        inherit_from=InheritFrom(provider="meta", value="llama-4-maverick"),
        status="preview",
        pricing=Pricing(input=0.20, output=0.60, blended=0.3),
        speed=score_speed(600),
        metrics=Metrics(context_window=131_072),
    ),
    ModelOverride(
        provider="groq",
        value="meta-llama/llama-4-scout-17b-16e-instruct",
        inherit_from=InheritFrom(provider="meta", value="llama-4-scout"),
        status="preview",
        pricing=Pricing(input=0.11, output=0.34, blended=0.1675),
        speed=score_speed(750),
        metrics=Metrics(context_window=131_072),
    ),
    ModelOverride(
        provider="groq",
        value="moonshotai/kimi-k2-instruct-0905",
        inherit_from=InheritFrom(provider="moonshotai", value="kimi-k2-0905"),
        status="preview",
        pricing=Pricing(input=1.0, output=3.0, blended=1.5),
        speed=score_speed(200),
        metrics=Metrics(context_window=262_144),
    ),
]
