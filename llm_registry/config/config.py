# -*- coding: utf-8 -*-
from typing import Optional

from pydantic import BaseModel, Field

from ..constant import AA_API_URL


class CachePolicyConfig(BaseModel):
    """Cache-Control policy shared by every manifest-derived endpoint."""

    max_age: int = Field(default=600, description="Client freshness (s)")
    s_maxage: int = Field(default=86400, description="Shared/edge freshness")
    stale_while_revalidate: int = 604800
    stale_if_error: int = 604800

    def header_value(self) -> str:
        return (
            f"public, max-age={self.max_age}, s-maxage={self.s_maxage}, "
            f"stale-while-revalidate={self.stale_while_revalidate}, "
            f"stale-if-error={self.stale_if_error}"
        )


class ServerConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8787


class UpstreamConfig(BaseModel):
    url: str = AA_API_URL
    timeout: float = 30.0


class Config(BaseModel):
    """Root config (config.json)."""

    cache: CachePolicyConfig = Field(default_factory=CachePolicyConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    upstream: UpstreamConfig = Field(default_factory=UpstreamConfig)
    # Directory for FileManifestStore; defaults to WORKING_DIR/store.
    store_dir: Optional[str] = None
    # When True, an inheritFrom pointing at an unknown model fails the
    # refresh instead of falling back to a plain override.
    strict_overrides: bool = False
