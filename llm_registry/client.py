# -*- coding: utf-8 -*-
"""Python client for a running registry API.

The client keeps the last manifest in memory. Manifest-derived lookups
are answered from that copy, and a forced refresh revalidates it with
``If-None-Match`` so an unchanged manifest costs a 304.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Dict, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from .cli.http import DEFAULT_BASE_URL
from .exceptions import RegistryClientError
from .providers.models import Manifest, Model, Provider, VersionInfo
from .providers.search import ModelSearchQuery, filter_models

logger = logging.getLogger(__name__)

# query field -> API parameter
_LIST_PARAMS = ("name", "provider", "capability", "status")
_SCALAR_PARAMS = {
    "release_date_from": "releaseDateFrom",
    "release_date_to": "releaseDateTo",
    "min_iq": "minIq",
    "min_speed": "minSpeed",
    "min_context_window": "minContextWindow",
    "mode": "mode",
}


def search_params(query: ModelSearchQuery) -> List[Tuple[str, str]]:
    """Encode a query as ``/v1/models/search`` parameters."""
    params: List[Tuple[str, str]] = []
    for field in _LIST_PARAMS:
        value = getattr(query, field)
        if value is None:
            continue
        values = [value] if isinstance(value, str) else value
        params += [(field, v) for v in values]
    for field, param in _SCALAR_PARAMS.items():
        value = getattr(query, field)
        if value is None:
            continue
        if isinstance(value, date):
            value = value.isoformat()
        elif isinstance(value, float) and value.is_integer():
            value = int(value)
        params.append((param, str(value)))
    return params


class RegistryClient:
    """Read-only access to ``/v1`` with an in-memory manifest cache.

    Failed requests raise ``RegistryClientError``. ``on_update`` is called
    with each newly fetched manifest and ``on_error`` with each request
    error before it is raised.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        enable_cache: bool = True,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.Client] = None,
        on_update: Optional[Callable[[Manifest], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.enable_cache = enable_cache
        self.on_update = on_update
        self.on_error = on_error
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=headers,
        )
        self._manifest: Optional[Manifest] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> "RegistryClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.clear_cache()
        if self._owns_client:
            self._client.close()

    @property
    def cached_manifest(self) -> Optional[Manifest]:
        return self._manifest

    @property
    def cached_version(self) -> Optional[str]:
        return self._manifest.version if self._manifest else None

    def clear_cache(self) -> None:
        self._manifest = None

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def _fail(self, message: str, status_code: Optional[int] = None):
        error = RegistryClientError(message, status_code=status_code)
        if self.on_error is not None:
            self.on_error(error)
        return error

    def _get(self, path: str, **kwargs) -> httpx.Response:
        try:
            r = self._client.get(path, **kwargs)
        except httpx.HTTPError as exc:
            raise self._fail(f"GET {path} failed: {exc}") from exc
        if r.status_code != 304 and r.is_error:
            raise self._fail(
                f"GET {path} failed: HTTP {r.status_code}",
                status_code=r.status_code,
            )
        return r

    def _parse(self, path: str, r: httpx.Response, parse):
        try:
            return parse(r.json())
        except (ValueError, ValidationError) as exc:
            raise self._fail(f"GET {path} returned malformed data: {exc}") from exc

    def _use_cache(self, force_refresh: bool) -> bool:
        return (
            self.enable_cache
            and self._manifest is not None
            and not force_refresh
        )

    # ------------------------------------------------------------------
    # Manifest
    # ------------------------------------------------------------------

    def get_manifest(self, force_refresh: bool = False) -> Manifest:
        """Return the manifest, from cache unless *force_refresh*.

        A forced refresh with a cached copy sends its ETag; a 304 keeps
        the cached manifest.
        """
        if self._use_cache(force_refresh):
            return self._manifest

        headers = {}
        if self.enable_cache and self._manifest is not None:
            headers["If-None-Match"] = self._manifest.etag
        r = self._get("/v1/manifest", headers=headers)
        if r.status_code == 304 and self._manifest is not None:
            logger.debug("Manifest %s not modified", self._manifest.version)
            return self._manifest

        manifest = self._parse("/v1/manifest", r, Manifest.model_validate)
        if self.enable_cache:
            self._manifest = manifest
            if self.on_update is not None:
                self.on_update(manifest)
        return manifest

    def get_version(self) -> VersionInfo:
        r = self._get("/v1/version")
        return self._parse("/v1/version", r, VersionInfo.model_validate)

    def check_for_updates(self) -> bool:
        """Refetch the manifest if the server version differs from the cache.

        Returns True when a new manifest was loaded. Without a cached
        manifest there is nothing to compare and the answer is False.
        """
        if self._manifest is None:
            return False
        try:
            info = self.get_version()
        except RegistryClientError as exc:
            logger.warning("Update check failed: %s", exc)
            return False
        if info.version == self._manifest.version:
            return False
        self.get_manifest(force_refresh=True)
        return True

    # ------------------------------------------------------------------
    # Providers and models
    # ------------------------------------------------------------------

    def get_providers(self, force_refresh: bool = False) -> List[Provider]:
        if self._use_cache(force_refresh):
            return list(self._manifest.providers)
        r = self._get("/v1/providers")
        return self._parse(
            "/v1/providers",
            r,
            lambda data: [Provider.model_validate(p) for p in data],
        )

    def get_models(self, force_refresh: bool = False) -> List[Model]:
        return list(self.get_manifest(force_refresh).models)

    def get_provider_models(
        self,
        provider_id: str,
        force_refresh: bool = False,
    ) -> List[Model]:
        if self._use_cache(force_refresh):
            return [m for m in self._manifest.models if m.provider == provider_id]
        path = f"/v1/providers/{provider_id}/models"
        r = self._get(path)
        return self._parse(
            path,
            r,
            lambda data: [Model.model_validate(m) for m in data],
        )

    def get_model(
        self,
        provider_id: str,
        value: str,
        force_refresh: bool = False,
    ) -> Optional[Model]:
        """Return one model by provider and value, or None if absent."""
        for model in self.get_provider_models(provider_id, force_refresh):
            if model.value == value:
                return model
        return None

    def search_models(
        self,
        query: Optional[ModelSearchQuery] = None,
        force_refresh: bool = False,
    ) -> List[Model]:
        """Search through the API, filtering locally if the call fails.

        The fallback uses the cached manifest when allowed, otherwise a
        freshly fetched one; it applies the same rules as the server.
        """
        if query is None:
            query = ModelSearchQuery()
        try:
            r = self._get("/v1/models/search", params=search_params(query))
            return self._parse(
                "/v1/models/search",
                r,
                lambda data: [Model.model_validate(m) for m in data],
            )
        except RegistryClientError as exc:
            logger.warning("Search endpoint failed, filtering locally: %s", exc)
        return filter_models(self.get_models(force_refresh), query)
