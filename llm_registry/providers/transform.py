# -*- coding: utf-8 -*-
"""Map the Artificial Analysis payload into base providers and models."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Protocol, Tuple

import httpx
from pydantic import BaseModel, Field, ValidationError

from ..constant import AA_API_URL, PREVIEW_WINDOW_DAYS
from ..exceptions import UpstreamUnavailableError
from .models import Metrics, Model, ModelStatus, Pricing, Provider
from .registry import get_model_registry, get_provider, provider_value_for
from .resolver import default_alias
from .scoring import score_iq, score_speed
from .search import parse_date

logger = logging.getLogger(__name__)

BASE_PROVIDER_STATUS = "active"

# ---------------------------------------------------------------------------
# Upstream response schema
# ---------------------------------------------------------------------------


class AAModelCreator(BaseModel):
    id: str
    name: str
    slug: str


class AAEvaluations(BaseModel):
    artificial_analysis_intelligence_index: Optional[float] = None
    artificial_analysis_coding_index: Optional[float] = None
    artificial_analysis_math_index: Optional[float] = None


class AAPricing(BaseModel):
    price_1m_blended_3_to_1: Optional[float] = None
    price_1m_input_tokens: Optional[float] = None
    price_1m_output_tokens: Optional[float] = None


class AAModel(BaseModel):
    id: str
    name: str
    slug: str
    release_date: Optional[str] = None
    model_creator: AAModelCreator
    evaluations: Optional[AAEvaluations] = None
    pricing: Optional[AAPricing] = None
    median_output_tokens_per_second: Optional[float] = None


class AAResponse(BaseModel):
    data: List[AAModel] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Transformation
# ---------------------------------------------------------------------------


def is_within_preview_window(
    release_date: Optional[str],
    now: Optional[datetime] = None,
    window_days: int = PREVIEW_WINDOW_DAYS,
) -> bool:
    released = parse_date(release_date)
    if released is None:
        return False
    if now is None:
        now = datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc).replace(tzinfo=None)
    diff = now - released
    return timedelta(0) <= diff <= timedelta(days=window_days)


def resolve_model_status(
    registry_status: Optional[ModelStatus],
    release_date: Optional[str],
    now: Optional[datetime] = None,
) -> ModelStatus:
    """Curated status wins; otherwise recent releases are 'preview'."""
    if registry_status:
        return registry_status
    if is_within_preview_window(release_date, now):
        return "preview"
    return "all"


def transform_aa_model(aa_model: AAModel, now: Optional[datetime] = None) -> Model:
    provider = provider_value_for(aa_model.model_creator.slug)
    value = aa_model.slug
    entry = get_model_registry(provider, value)
    evaluations = aa_model.evaluations or AAEvaluations()
    aa_pricing = aa_model.pricing or AAPricing()

    metrics = Metrics(
        context_window=entry.context_window if entry else None,
        intelligence_index=evaluations.artificial_analysis_intelligence_index,
        coding_index=evaluations.artificial_analysis_coding_index,
        math_index=evaluations.artificial_analysis_math_index,
    )
    pricing = Pricing(
        input=aa_pricing.price_1m_input_tokens,
        output=aa_pricing.price_1m_output_tokens,
        blended=aa_pricing.price_1m_blended_3_to_1,
    )

    return Model(
        id=aa_model.id,
        value=value,
        provider=provider,
        name=aa_model.name,
        alias=default_alias(aa_model.name),
        capabilities=entry.capabilities.model_copy() if entry else None,
        iq=score_iq(evaluations.artificial_analysis_intelligence_index),
        speed=score_speed(aa_model.median_output_tokens_per_second),
        # empty nested objects are dropped rather than published as {}
        metrics=metrics if metrics.to_json_dict() else None,
        pricing=pricing if pricing.to_json_dict() else None,
        release_date=aa_model.release_date,
        status=resolve_model_status(
            entry.status if entry else None,
            aa_model.release_date,
            now,
        ),
    )


def build_base_dataset(
    aa_models: List[AAModel],
    now: Optional[datetime] = None,
) -> Tuple[List[Provider], List[Model]]:
    """Transform upstream models and derive the providers they belong to."""
    models = [transform_aa_model(m, now) for m in aa_models]

    providers: dict[str, Provider] = {}
    for model in models:
        if model.provider in providers:
            continue
        known = get_provider(model.provider)
        providers[model.provider] = Provider(
            value=model.provider,
            name=known.name if known else model.provider,
            key_placeholder=known.key_placeholder if known else None,
            website=known.website if known else None,
            status=BASE_PROVIDER_STATUS,
        )
    return list(providers.values()), models


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------


class BaseDatasetSource(Protocol):
    """Anything that can produce the base ``(providers, models)`` pair."""

    def fetch(self) -> Tuple[List[Provider], List[Model]]:
        ...


class ArtificialAnalysisSource:
    """Fetch the base dataset from the Artificial Analysis API."""

    name = "artificialanalysis"

    def __init__(
        self,
        api_key: str,
        url: str = AA_API_URL,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ):
        self._api_key = api_key
        self._url = url
        self._timeout = timeout
        self._client = client

    def _get(self) -> httpx.Response:
        headers = {"x-api-key": self._api_key}
        if self._client is not None:
            return self._client.get(self._url, headers=headers)
        with httpx.Client(timeout=self._timeout) as client:
            return client.get(self._url, headers=headers)

    def fetch_raw(self) -> AAResponse:
        try:
            response = self._get()
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise UpstreamUnavailableError(self.name, str(exc)) from exc

        try:
            return AAResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise UpstreamUnavailableError(
                self.name,
                f"Malformed payload: {exc}",
            ) from exc

    def fetch(self) -> Tuple[List[Provider], List[Model]]:
        payload = self.fetch_raw()
        logger.debug("Fetched %d upstream models", len(payload.data))
        return build_base_dataset(payload.data)
