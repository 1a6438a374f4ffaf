# -*- coding: utf-8 -*-
"""Tests for the command line interface."""

import json

import httpx
import pytest
from click.testing import CliRunner
from fastapi.testclient import TestClient

from llm_registry.app import create_app
from llm_registry.cli import query_cmd, registry_cmd
from llm_registry.cli.main import cli
from llm_registry.exceptions import ManifestNotFoundError, UpstreamUnavailableError
from llm_registry.providers import FileManifestStore, load_manifest


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def served(monkeypatch, manifest):
    """Route the query commands to an in-process app."""
    seen = []

    def _client(base_url):
        seen.append(base_url)
        return TestClient(create_app(lambda: manifest))

    monkeypatch.setattr(query_cmd, "client", _client)
    return seen


class TestQueryCommands:
    def test_search(self, runner, served):
        result = runner.invoke(
            cli,
            ["search", "--provider", "openai", "--min-iq", "4", "--name", "oss"],
        )

        assert result.exit_code == 0, result.output
        body = json.loads(result.output)
        assert [m["value"] for m in body] == ["gpt-oss-120b"]
        assert served == ["http://127.0.0.1:8787"]

    def test_search_repeated_capability(self, runner, served):
        result = runner.invoke(
            cli,
            ["search", "--capability", "vision", "--capability", "audio"],
        )

        assert result.exit_code == 0, result.output
        assert [m["value"] for m in json.loads(result.output)] == [
            "gemini-3-flash",
        ]

    def test_providers(self, runner, served):
        result = runner.invoke(cli, ["providers"])

        assert result.exit_code == 0, result.output
        assert [p["value"] for p in json.loads(result.output)] == [
            "anthropic",
            "google",
            "openai",
            "xai",
        ]

    def test_provider_models(self, runner, served):
        result = runner.invoke(
            cli,
            ["providers", "anthropic", "--base-url", "http://registry.test/"],
        )

        assert result.exit_code == 0, result.output
        assert [m["id"] for m in json.loads(result.output)] == [
            "aa-claude-4-5-sonnet",
        ]
        assert served == ["http://registry.test"]

    def test_version(self, runner, served, manifest):
        result = runner.invoke(cli, ["version"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["version"] == manifest.version

    def test_version_not_modified(self, runner, served, manifest):
        result = runner.invoke(cli, ["version", "--etag", manifest.etag])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == f"not modified ({manifest.etag})"

    def test_unavailable_registry(self, runner, monkeypatch):
        def _missing():
            raise ManifestNotFoundError()

        monkeypatch.setattr(
            query_cmd,
            "client",
            lambda base_url: TestClient(create_app(_missing)),
        )

        result = runner.invoke(cli, ["providers"])

        assert result.exit_code != 0
        assert "Manifest not initialized" in result.output


class TestRefreshCommand:
    @pytest.fixture
    def fake_source(self, monkeypatch, base_providers, base_models):
        created = []

        class _Source:
            def __init__(self, api_key, url=None, timeout=None):
                created.append(api_key)

            def fetch(self):
                return base_providers, base_models

        monkeypatch.setattr(registry_cmd, "ArtificialAnalysisSource", _Source)
        return created

    def test_requires_api_key(self, runner, monkeypatch):
        monkeypatch.delenv("AA_API_KEY", raising=False)

        result = runner.invoke(cli, ["refresh"])

        assert result.exit_code != 0
        assert "AA_API_KEY is not set" in result.output

    def test_publishes_to_store_dir(self, runner, fake_source, tmp_path):
        result = runner.invoke(
            cli,
            ["refresh", "--api-key", "k", "--store-dir", str(tmp_path)],
        )

        assert result.exit_code == 0, result.output
        published = load_manifest(FileManifestStore(tmp_path))
        assert result.output.startswith(f"✓ {published.version}:")
        assert fake_source == ["k"]

    def test_api_key_from_env(self, runner, fake_source, tmp_path, monkeypatch):
        monkeypatch.setenv("AA_API_KEY", "from-env")

        result = runner.invoke(cli, ["refresh", "--store-dir", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert fake_source == ["from-env"]

    def test_dry_run_publishes_nothing(self, runner, fake_source, tmp_path):
        result = runner.invoke(
            cli,
            [
                "refresh",
                "--api-key",
                "k",
                "--store-dir",
                str(tmp_path),
                "--dry-run",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "[not published]" in result.output
        assert FileManifestStore(tmp_path).get("manifest") is None

    def test_upstream_failure(self, runner, monkeypatch, tmp_path):
        class _Broken:
            def __init__(self, *args, **kwargs):
                pass

            def fetch(self):
                raise UpstreamUnavailableError("artificialanalysis", "HTTP 500")

        monkeypatch.setattr(registry_cmd, "ArtificialAnalysisSource", _Broken)

        result = runner.invoke(
            cli,
            ["refresh", "--api-key", "k", "--store-dir", str(tmp_path)],
        )

        assert result.exit_code == 1
        assert "HTTP 500" in result.output
        assert FileManifestStore(tmp_path).get("manifest") is None

    def test_store_write_failure(self, runner, fake_source, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")

        result = runner.invoke(
            cli,
            ["refresh", "--api-key", "k", "--store-dir", str(blocker / "store")],
        )

        assert result.exit_code == 1
        assert "Cannot write manifest" in result.output
        assert not isinstance(result.exception, OSError)


class TestApiErrors:
    @staticmethod
    def _serve(monkeypatch, response):
        transport = httpx.MockTransport(lambda request: response)
        monkeypatch.setattr(
            query_cmd,
            "client",
            lambda base_url: httpx.Client(base_url=base_url, transport=transport),
        )

    def test_non_json_unavailable_body(self, runner, monkeypatch):
        self._serve(
            monkeypatch,
            httpx.Response(503, text="<html>upstream down</html>"),
        )

        result = runner.invoke(cli, ["providers"])

        assert result.exit_code == 1
        assert "registry unavailable: <html>upstream down</html>" in result.output

    def test_empty_unavailable_body(self, runner, monkeypatch):
        self._serve(monkeypatch, httpx.Response(503))

        result = runner.invoke(cli, ["version"])

        assert result.exit_code == 1
        assert "registry unavailable: service unavailable" in result.output

    def test_other_errors_are_readable(self, runner, monkeypatch):
        self._serve(monkeypatch, httpx.Response(500, json={"detail": "boom"}))

        result = runner.invoke(cli, ["search", "--name", "gpt"])

        assert result.exit_code == 1
        assert "HTTP 500: boom" in result.output
