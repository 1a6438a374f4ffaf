# -*- coding: utf-8 -*-
"""Tests for scoring and the upstream transformation."""

from datetime import datetime, timezone

import httpx
import pytest

from llm_registry.exceptions import UpstreamUnavailableError
from llm_registry.providers import ArtificialAnalysisSource, score_iq, score_speed
from llm_registry.providers.transform import (
    AAModel,
    build_base_dataset,
    is_within_preview_window,
    resolve_model_status,
    transform_aa_model,
)

NOW = datetime(2026, 1, 10, 12, 0, tzinfo=timezone.utc)


def _aa_model(**fields) -> AAModel:
    data = {
        "id": "aa-1",
        "name": "Some Model",
        "slug": "some-model",
        "model_creator": {"id": "c-1", "name": "Creator", "slug": "creator"},
    }
    data.update(fields)
    return AAModel.model_validate(data)


class TestScoring:
    @pytest.mark.parametrize(
        "index, expected",
        [
            (None, 0),
            (0, 0),
            (24, 0),
            (25, 1),
            (34, 1),
            (35, 2),
            (44.9, 2),
            (45, 3),
            (55, 4),
            (64, 4),
            (65, 5),
            (100, 5),
        ],
    )
    def test_score_iq(self, index, expected):
        assert score_iq(index) == expected

    @pytest.mark.parametrize(
        "tps, expected",
        [
            (None, 0),
            (24, 0),
            (25, 1),
            (49, 1),
            (50, 2),
            (100, 3),
            (200, 4),
            (299, 4),
            (300, 5),
            (3000, 5),
        ],
    )
    def test_score_speed(self, tps, expected):
        assert score_speed(tps) == expected


class TestStatus:
    def test_registry_status_wins(self):
        assert resolve_model_status("latest", "2026-01-09", NOW) == "latest"

    def test_recent_release_is_preview(self):
        assert resolve_model_status(None, "2026-01-05", NOW) == "preview"

    def test_old_or_missing_release_is_all(self):
        assert resolve_model_status(None, "2025-06-01", NOW) == "all"
        assert resolve_model_status(None, None, NOW) == "all"

    def test_future_release_is_not_preview(self):
        assert not is_within_preview_window("2026-02-01", NOW)

    def test_window_edges(self):
        assert is_within_preview_window("2026-01-03T12:00:00Z", NOW)
        assert not is_within_preview_window("2026-01-03T11:59:59Z", NOW)


class TestTransformModel:
    def test_curated_model(self):
        aa = _aa_model(
            id="aa-gpt-5-mini",
            name="GPT-5 mini (high)",
            slug="gpt-5-mini",
            release_date="2025-08-07",
            model_creator={"id": "c", "name": "OpenAI", "slug": "openai"},
            evaluations={
                "artificial_analysis_intelligence_index": 61.0,
                "artificial_analysis_coding_index": 50.5,
            },
            pricing={
                "price_1m_input_tokens": 0.25,
                "price_1m_output_tokens": 2.0,
                "price_1m_blended_3_to_1": 0.69,
            },
            median_output_tokens_per_second=120.0,
        )

        model = transform_aa_model(aa, NOW)

        assert model.id == "aa-gpt-5-mini"
        assert model.provider == "openai"
        assert model.value == "gpt-5-mini"
        assert model.alias == "GPT-5 mini"
        assert model.iq == 4
        assert model.speed == 3
        assert model.status == "latest"
        assert model.metrics.context_window == 400000
        assert model.metrics.coding_index == 50.5
        assert model.pricing.blended == 0.69
        assert model.capabilities.has("reasoning")
        assert model.capabilities.audio is False
        assert model.config is None

    def test_uncurated_model_has_no_capabilities(self):
        model = transform_aa_model(
            _aa_model(release_date="2026-01-08"),
            NOW,
        )

        assert model.capabilities is None
        assert model.status == "preview"
        assert model.iq == 0
        assert model.speed == 0

    def test_empty_metrics_and_pricing_are_absent(self):
        model = transform_aa_model(_aa_model(evaluations={}, pricing={}), NOW)

        assert model.metrics is None
        assert model.pricing is None
        assert "metrics" not in model.to_json_dict()

    def test_xai_creator_slug_is_mapped(self):
        model = transform_aa_model(
            _aa_model(
                slug="grok-4",
                model_creator={"id": "c", "name": "xAI", "slug": "x-ai"},
            ),
            NOW,
        )
        assert model.provider == "xai"


def test_build_base_dataset_derives_providers():
    aa_models = [
        _aa_model(
            id="1",
            slug="gpt-5-mini",
            model_creator={"id": "c", "name": "OpenAI", "slug": "openai"},
        ),
        _aa_model(
            id="2",
            slug="gpt-5-nano",
            model_creator={"id": "c", "name": "OpenAI", "slug": "openai"},
        ),
        _aa_model(id="3", slug="thing"),
    ]

    providers, models = build_base_dataset(aa_models, NOW)

    assert [m.id for m in models] == ["1", "2", "3"]
    assert [p.value for p in providers] == ["openai", "creator"]
    openai, creator = providers
    assert openai.name == "OpenAI"
    assert openai.key_placeholder == "sk-..."
    assert openai.status == "active"
    assert creator.name == "creator"
    assert creator.website is None


class TestArtificialAnalysisSource:
    PAYLOAD = {
        "status": 200,
        "data": [
            {
                "id": "aa-claude",
                "name": "Claude 4.5 Sonnet",
                "slug": "claude-4-5-sonnet",
                "release_date": "2025-09-29",
                "model_creator": {
                    "id": "c",
                    "name": "Anthropic",
                    "slug": "anthropic",
                },
                "evaluations": {"artificial_analysis_intelligence_index": 63},
                "median_output_tokens_per_second": 70,
            },
        ],
    }

    @staticmethod
    def _source(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        return ArtificialAnalysisSource(
            "test-key",
            url="https://aa.test/models",
            client=client,
        )

    def test_fetch(self):
        seen = {}

        def handler(request):
            seen["key"] = request.headers.get("x-api-key")
            seen["url"] = str(request.url)
            return httpx.Response(200, json=self.PAYLOAD)

        providers, models = self._source(handler).fetch()

        assert seen == {"key": "test-key", "url": "https://aa.test/models"}
        assert [p.value for p in providers] == ["anthropic"]
        assert models[0].value == "claude-4-5-sonnet"
        assert models[0].iq == 4
        assert models[0].speed == 2

    def test_http_error(self):
        source = self._source(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(UpstreamUnavailableError, match="artificialanalysis"):
            source.fetch()

    def test_malformed_json(self):
        source = self._source(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(UpstreamUnavailableError, match="Malformed"):
            source.fetch()

    def test_schema_mismatch(self):
        source = self._source(
            lambda request: httpx.Response(200, json={"data": [{"id": 1}]}),
        )

        with pytest.raises(UpstreamUnavailableError):
            source.fetch()

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(UpstreamUnavailableError, match="refused"):
            self._source(handler).fetch()
