# -*- coding: utf-8 -*-
import os
from pathlib import Path

WORKING_DIR = (
    Path(os.environ.get("LLM_REGISTRY_WORKING_DIR", "~/.llm-registry"))
    .expanduser()
    .resolve()
)

CONFIG_FILE = os.environ.get("LLM_REGISTRY_CONFIG_FILE", "config.json")

# Directory holding published manifest blobs (FileManifestStore).
STORE_DIR = WORKING_DIR / "store"

# Well-known key the sealed manifest is stored under.
MANIFEST_KEY = "manifest"

# Env key for app log level (used by CLI and the served app).
LOG_LEVEL_ENV = "LLM_REGISTRY_LOG_LEVEL"

# Upstream data provider (Artificial Analysis).
AA_API_KEY_ENV = "AA_API_KEY"
AA_API_URL = os.environ.get(
    "AA_API_URL",
    "https://artificialanalysis.ai/api/v2/data/llms/models",
)

# Shared secret for POST /cron/trigger. Unset disables the endpoint.
CRON_AUTH_TOKEN_ENV = "CRON_AUTH_TOKEN"

# Models released within this many days without a curated registry
# entry are published with status "preview".
PREVIEW_WINDOW_DAYS = int(
    os.environ.get("LLM_REGISTRY_PREVIEW_WINDOW_DAYS", "7"),
)

# When True, expose /docs, /redoc, /openapi.json (keep False in prod).
DOCS_ENABLED = os.environ.get("LLM_REGISTRY_OPENAPI_DOCS", "false").lower() in (
    "true",
    "1",
    "yes",
)


def get_api_key() -> str:
    """Return the upstream API key, or an empty string if unset."""
    return os.environ.get(AA_API_KEY_ENV, "").strip()


def get_cron_auth_token() -> str:
    """Return the cron trigger token, or an empty string if unset."""
    return os.environ.get(CRON_AUTH_TOKEN_ENV, "").strip()
