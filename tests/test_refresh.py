# -*- coding: utf-8 -*-
"""Tests for the refresh job."""

import logging

import pytest

from llm_registry.custom import official_overrides
from llm_registry.exceptions import (
    ManifestWriteError,
    OverrideResolutionError,
    UpstreamUnavailableError,
)
from llm_registry.providers import (
    FileManifestStore,
    InheritFrom,
    MemoryManifestStore,
    ModelOverride,
    OverrideConfig,
    load_manifest,
    save_manifest,
)
from llm_registry.refresh import resolve_manifest, run_refresh


class StaticSource:
    def __init__(self, providers, models):
        self.providers = providers
        self.models = models
        self.calls = 0

    def fetch(self):
        self.calls += 1
        return self.providers, self.models


class FailingSource:
    def fetch(self):
        raise UpstreamUnavailableError("test", "HTTP 503")


@pytest.fixture
def source(base_providers, base_models):
    return StaticSource(base_providers, base_models)


class TestRunRefresh:
    def test_publishes_manifest(self, source, caplog):
        store = MemoryManifestStore()

        with caplog.at_level(logging.INFO, logger="llm_registry.refresh"):
            result = run_refresh(source, store, OverrideConfig())

        published = load_manifest(store)
        assert result.success is True
        assert result.version == published.version
        assert result.providers == 4
        assert result.models == 5
        assert result.generated_at == published.generated_at
        assert "Manifest updated successfully" in caplog.text

    def test_rerun_keeps_tags(self, source):
        store = MemoryManifestStore()

        first = run_refresh(source, store, OverrideConfig())
        second = run_refresh(source, store, OverrideConfig())

        assert first.version == second.version
        assert source.calls == 2

    def test_failure_leaves_store_untouched(self, manifest, caplog):
        store = MemoryManifestStore()
        save_manifest(store, manifest)

        with caplog.at_level(logging.ERROR):
            with pytest.raises(UpstreamUnavailableError):
                run_refresh(FailingSource(), store)

        assert load_manifest(store) == manifest
        assert "Failed to update manifest" in caplog.text

    def test_strict_override_failure_writes_nothing(self, source):
        store = MemoryManifestStore()
        overrides = OverrideConfig(
            models=[
                ModelOverride(
                    provider="azure",
                    value="x",
                    inherit_from=InheritFrom(provider="none", value="none"),
                ),
            ],
        )

        with pytest.raises(OverrideResolutionError):
            run_refresh(source, store, overrides, strict=True)

        assert store.get("manifest") is None

    def test_write_failure_is_logged_and_raised(self, source, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = FileManifestStore(blocker / "store")

        with caplog.at_level(logging.ERROR, logger="llm_registry.refresh"):
            with pytest.raises(ManifestWriteError):
                run_refresh(source, store, OverrideConfig())

        assert "Failed to update manifest" in caplog.text
        assert "Cannot write manifest" in caplog.text


class TestOfficialOverrides:
    def test_applied_by_default(self, source):
        manifest = resolve_manifest(source)

        providers = {p.value: p for p in manifest.providers}
        models = {m.key: m for m in manifest.models}

        assert providers["azure"].name == "Azure"
        assert providers["groq"].status == "active"
        azure_mini = models["azure:gpt-5-mini"]
        assert azure_mini.id == "custom:azure:gpt-5-mini"
        assert azure_mini.name == "GPT-5 Mini"
        assert azure_mini.iq == 4
        assert models["azure:gpt-5-pro"].name == "GPT-5 Pro"
        assert models["azure:model-router"].name == "Model Router"

    def test_inherited_hosted_model_keeps_source_fields(self, source):
        manifest = resolve_manifest(source)
        models = {m.key: m for m in manifest.models}

        hosted = models["cerebras:gpt-oss-120b"]
        origin = models["openai:gpt-oss-120b"]

        assert hosted.name == origin.name
        assert hosted.capabilities == origin.capabilities
        assert hosted.speed == 5
        assert hosted.metrics.context_window == 65536
        assert hosted.pricing.input == 0.35

    def test_official_override_lists_are_copied(self):
        first = official_overrides()
        first.models.clear()

        assert official_overrides().models
