# -*- coding: utf-8 -*-
"""Pydantic data models for providers, models, overrides and the manifest."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

ProviderStatus = Literal["active", "beta", "deprecated"]
ModelStatus = Literal["latest", "preview", "all"]
ConfigMode = Literal["auto", "json", "tool"]
CapabilityKey = Literal["text", "vision", "reasoning", "toolUse", "json", "audio"]

CAPABILITY_KEYS: tuple[str, ...] = (
    "text",
    "vision",
    "reasoning",
    "toolUse",
    "json",
    "audio",
)

# JSON key -> attribute name on Capabilities
_CAPABILITY_ATTRS: Dict[str, str] = {
    "text": "text",
    "vision": "vision",
    "reasoning": "reasoning",
    "toolUse": "tool_use",
    "json": "json_mode",
    "audio": "audio",
}


class RegistryRecord(BaseModel):
    """Base for every record serialized with camelCase keys."""

    model_config = {"populate_by_name": True}

    def to_json_dict(self) -> dict:
        """Dump with JSON aliases, dropping absent optional fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# Nested model attributes
# ---------------------------------------------------------------------------


class Capabilities(RegistryRecord):
    """Capability flags; anything other than ``text`` may be absent."""

    text: bool = Field(default=False, description="Plain text generation")
    vision: Optional[bool] = Field(default=None, description="Image input")
    reasoning: Optional[bool] = Field(default=None)
    tool_use: Optional[bool] = Field(default=None, alias="toolUse")
    json_mode: Optional[bool] = Field(default=None, alias="json")
    audio: Optional[bool] = Field(default=None)

    def has(self, key: str) -> bool:
        """Return True only when *key* is a known flag explicitly set."""
        attr = _CAPABILITY_ATTRS.get(key)
        if attr is None:
            return False
        return bool(getattr(self, attr))

    @classmethod
    def from_keys(cls, *keys: str) -> "Capabilities":
        """Build a full flag set, True for each key given, False otherwise."""
        unknown = [k for k in keys if k not in _CAPABILITY_ATTRS]
        if unknown:
            raise ValueError(f"Unknown capability keys: {unknown}")
        wanted = set(keys)
        return cls.model_validate(
            {key: key in wanted for key in CAPABILITY_KEYS},
        )


class Metrics(RegistryRecord):
    context_window: Optional[int] = Field(
        default=None,
        alias="contextWindow",
        description="Maximum context window in tokens",
    )
    intelligence_index: Optional[float] = Field(
        default=None,
        alias="intelligenceIndex",
    )
    coding_index: Optional[float] = Field(default=None, alias="codingIndex")
    math_index: Optional[float] = Field(default=None, alias="mathIndex")


class Pricing(RegistryRecord):
    """Cost per 1M tokens (USD); blended uses a 3:1 input/output ratio."""

    input: Optional[float] = None
    output: Optional[float] = None
    blended: Optional[float] = None


class ModelConfig(RegistryRecord):
    """AI SDK settings for structured output."""

    mode: ConfigMode


# ---------------------------------------------------------------------------
# Providers and models
# ---------------------------------------------------------------------------


class Provider(RegistryRecord):
    value: str = Field(..., description="Provider slug, e.g. 'openai'")
    name: str = Field(..., description="Human-readable provider name")
    key_placeholder: Optional[str] = Field(
        default=None,
        alias="keyPlaceholder",
        description="Example API key format, e.g. 'sk-...'",
    )
    website: Optional[str] = Field(
        default=None,
        description="Where to obtain an API key",
    )
    status: Optional[ProviderStatus] = None


class Model(RegistryRecord):
    """A single model as served in the manifest."""

    id: str = Field(..., description="Upstream identifier or custom:<p>:<v>")
    value: str = Field(..., description="Model string for AI SDK usage")
    provider: str = Field(..., description="Owning provider slug")
    name: str = Field(..., description="Full display name")
    alias: Optional[str] = Field(
        default=None,
        description="Short name for dropdowns",
    )
    capabilities: Optional[Capabilities] = None
    iq: Optional[int] = Field(default=None, ge=0, le=5)
    speed: Optional[int] = Field(default=None, ge=0, le=5)
    metrics: Optional[Metrics] = None
    pricing: Optional[Pricing] = None
    release_date: Optional[str] = Field(default=None, alias="releaseDate")
    status: Optional[ModelStatus] = None
    config: Optional[ModelConfig] = None

    @property
    def key(self) -> str:
        return model_key(self.provider, self.value)


def model_key(provider: str, value: str) -> str:
    """Map key identifying a model within a manifest."""
    return f"{provider}:{value}"


# ---------------------------------------------------------------------------
# Overrides
# ---------------------------------------------------------------------------


class ProviderOverride(RegistryRecord):
    """Patch for an existing provider, or definition of a new one."""

    value: str
    name: Optional[str] = None
    key_placeholder: Optional[str] = Field(
        default=None,
        alias="keyPlaceholder",
    )
    website: Optional[str] = None
    status: Optional[ProviderStatus] = None


class InheritFrom(RegistryRecord):
    provider: str
    value: str


class ModelOverride(RegistryRecord):
    """Patch, creation or clone-with-rename of a model.

    ``inheritFrom`` points at a base model whose fields seed the new
    ``(provider, value)`` entry; every other set field is applied on top.
    """

    provider: str = Field(..., description="Target provider slug")
    value: str = Field(..., description="Target model value")
    inherit_from: Optional[InheritFrom] = Field(
        default=None,
        alias="inheritFrom",
    )
    id: Optional[str] = None
    name: Optional[str] = None
    alias: Optional[str] = None
    capabilities: Optional[Capabilities] = None
    iq: Optional[int] = Field(default=None, ge=0, le=5)
    speed: Optional[int] = Field(default=None, ge=0, le=5)
    metrics: Optional[Metrics] = None
    pricing: Optional[Pricing] = None
    release_date: Optional[str] = Field(default=None, alias="releaseDate")
    status: Optional[ModelStatus] = None
    config: Optional[ModelConfig] = None


class OverrideConfig(RegistryRecord):
    providers: List[ProviderOverride] = Field(default_factory=list)
    models: List[ModelOverride] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Manifest and responses
# ---------------------------------------------------------------------------


class Manifest(RegistryRecord):
    """Sealed output of one resolution run."""

    version: str = Field(..., description="Registry version identifier")
    etag: str = Field(..., description="Strong validator for caching")
    generated_at: str = Field(
        ...,
        alias="generatedAt",
        description="ISO 8601 timestamp of the resolution run",
    )
    providers: List[Provider] = Field(default_factory=list)
    models: List[Model] = Field(default_factory=list)


class VersionInfo(RegistryRecord):
    version: str
    etag: str
    generated_at: str = Field(..., alias="generatedAt")


class RefreshResult(RegistryRecord):
    """Summary of one refresh run."""

    success: bool
    version: str
    providers: int
    models: int
    generated_at: str = Field(..., alias="generatedAt")


class HealthInfo(BaseModel):
    status: Literal["ok"] = "ok"
