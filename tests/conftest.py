# -*- coding: utf-8 -*-
"""Shared fixtures: model factories, a small manifest and an API client."""

from __future__ import annotations

from typing import Callable, List

import pytest
from fastapi.testclient import TestClient

from llm_registry.app import create_app
from llm_registry.providers import Manifest, Model, Provider, build_manifest


def _make_model(**fields) -> Model:
    data = {
        "id": "model-id",
        "value": "model-value",
        "provider": "provider",
        "name": "Model Name",
    }
    data.update(fields)
    return Model.model_validate(data)


def _make_provider(**fields) -> Provider:
    data = {"value": "provider", "name": "Provider"}
    data.update(fields)
    return Provider.model_validate(data)


@pytest.fixture
def make_model() -> Callable[..., Model]:
    return _make_model


@pytest.fixture
def make_provider() -> Callable[..., Provider]:
    return _make_provider


@pytest.fixture
def base_providers() -> List[Provider]:
    return [
        _make_provider(value="xai", name="xAI", status="active"),
        _make_provider(
            value="openai",
            name="OpenAI",
            keyPlaceholder="sk-...",
            website="https://platform.openai.com/api-keys",
            status="active",
        ),
        _make_provider(value="google", name="Google", status="active"),
        _make_provider(value="anthropic", name="Anthropic", status="active"),
    ]


@pytest.fixture
def base_models() -> List[Model]:
    return [
        _make_model(
            id="aa-gpt-5-mini",
            provider="openai",
            value="gpt-5-mini",
            name="GPT-5 Mini",
            alias="GPT-5 Mini",
            capabilities={"text": True, "vision": True, "toolUse": True},
            iq=4,
            speed=3,
            metrics={"contextWindow": 400000, "intelligenceIndex": 61.0},
            pricing={"input": 0.25, "output": 2.0, "blended": 0.69},
            releaseDate="2025-08-07",
            status="latest",
            config={"mode": "json"},
        ),
        _make_model(
            id="aa-gpt-oss-120b",
            provider="openai",
            value="gpt-oss-120b",
            name="gpt-oss-120B (high)",
            alias="gpt-oss-120B",
            capabilities={"text": True, "reasoning": True, "toolUse": True},
            iq=4,
            speed=5,
            metrics={"contextWindow": 131000},
            releaseDate="2025-08-05",
            status="latest",
        ),
        _make_model(
            id="aa-claude-4-5-sonnet",
            provider="anthropic",
            value="claude-4-5-sonnet",
            name="Claude 4.5 Sonnet",
            capabilities={"text": True, "vision": True, "toolUse": True},
            iq=5,
            speed=2,
            metrics={"contextWindow": 1000000},
            releaseDate="2025-09-29",
            status="latest",
            config={"mode": "tool"},
        ),
        _make_model(
            id="aa-gemini-3-flash",
            provider="google",
            value="gemini-3-flash",
            name="Gemini 3 Flash",
            capabilities={"text": True, "vision": True, "audio": True},
            iq=5,
            speed=4,
            metrics={"contextWindow": 1048576},
            releaseDate="2025-12-17",
            status="preview",
        ),
        _make_model(
            id="aa-grok-voice",
            provider="xai",
            value="grok-voice",
            name="Grok Voice",
            capabilities={"audio": True, "reasoning": True},
            status="all",
        ),
    ]


@pytest.fixture
def manifest(base_providers, base_models) -> Manifest:
    return build_manifest(
        base_providers,
        base_models,
        generated_at="2026-01-01T00:00:00.000Z",
    )


@pytest.fixture
def api_client(manifest) -> TestClient:
    return TestClient(create_app(lambda: manifest))
