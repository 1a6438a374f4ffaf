# -*- coding: utf-8 -*-
"""Model search: one set of filter rules shared by the API and the CLI."""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Callable, Iterable, List, Optional, Union

from pydantic import BaseModel, Field

from .models import Model

StrOrList = Optional[Union[str, List[str]]]
DateBound = Optional[Union[datetime, date, str]]


class ModelSearchQuery(BaseModel):
    """Optional filter predicates, combined with AND.

    List-valued fields match any of their values (OR), except
    ``capability`` where a model must support every listed flag.
    """

    model_config = {"populate_by_name": True}

    name: StrOrList = Field(
        default=None,
        description="Partial match on model name, value or alias",
    )
    provider: StrOrList = Field(default=None, description="Provider slug")
    capability: StrOrList = Field(
        default=None,
        description="Require every listed capability",
    )
    status: StrOrList = None
    release_date_from: DateBound = Field(default=None, alias="releaseDateFrom")
    release_date_to: DateBound = Field(default=None, alias="releaseDateTo")
    min_iq: Optional[float] = Field(default=None, alias="minIq")
    min_speed: Optional[float] = Field(default=None, alias="minSpeed")
    min_context_window: Optional[float] = Field(
        default=None,
        alias="minContextWindow",
    )
    mode: Optional[str] = None


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def parse_score(value: Optional[str]) -> Optional[float]:
    """Parse a numeric query parameter; blank or invalid means absent."""
    if value is None or not value.strip():
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    if math.isnan(parsed):
        return None
    return parsed


def parse_date(value: DateBound) -> Optional[datetime]:
    """Parse a date bound or release date into a naive UTC datetime."""
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _terms(value: StrOrList) -> List[str]:
    """Normalize a scalar-or-list predicate, dropping blank entries."""
    if value is None:
        return []
    values = [value] if isinstance(value, str) else value
    return [v.strip() for v in values if v and v.strip()]


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


def _name_matches(model: Model, terms: List[str]) -> bool:
    haystacks = [model.name.lower(), model.value.lower()]
    if model.alias:
        haystacks.append(model.alias.lower())
    return any(term in hay for term in terms for hay in haystacks)


def _capabilities_match(model: Model, required: List[str]) -> bool:
    caps = model.capabilities
    if caps is None:
        return False
    return all(caps.has(key) for key in required)


def _build_predicates(query: ModelSearchQuery) -> List[Callable[[Model], bool]]:
    predicates: List[Callable[[Model], bool]] = []

    names = [t.lower() for t in _terms(query.name)]
    if names:
        predicates.append(lambda m: _name_matches(m, names))

    providers = set(_terms(query.provider))
    if providers:
        predicates.append(lambda m: m.provider in providers)

    capabilities = _terms(query.capability)
    if capabilities:
        predicates.append(lambda m: _capabilities_match(m, capabilities))

    statuses = set(_terms(query.status))
    if statuses:
        predicates.append(lambda m: m.status in statuses)

    date_from = parse_date(query.release_date_from)
    date_to = parse_date(query.release_date_to)
    if date_from is not None or date_to is not None:

        def _in_range(m: Model) -> bool:
            released = parse_date(m.release_date)
            if released is None:
                return False
            if date_from is not None and released < date_from:
                return False
            if date_to is not None and released > date_to:
                return False
            return True

        predicates.append(_in_range)

    if query.min_iq is not None:
        min_iq = query.min_iq
        predicates.append(lambda m: (m.iq or 0) >= min_iq)

    if query.min_speed is not None:
        min_speed = query.min_speed
        predicates.append(lambda m: (m.speed or 0) >= min_speed)

    if query.min_context_window is not None:
        min_window = query.min_context_window

        def _window(m: Model) -> bool:
            window = m.metrics.context_window if m.metrics else None
            return (window or 0) >= min_window

        predicates.append(_window)

    if query.mode:
        mode = query.mode
        predicates.append(
            lambda m: m.config is not None and m.config.mode == mode,
        )

    return predicates


def filter_models(
    models: Iterable[Model],
    query: Optional[ModelSearchQuery] = None,
) -> List[Model]:
    """Return the models matching every predicate of *query*, in order.

    Missing model fields behave as their weakest value: False for
    capabilities, 0 for scores and context window, excluded from date
    ranges. The input is never mutated.
    """
    if query is None:
        return list(models)
    predicates = _build_predicates(query)
    return [m for m in models if all(p(m) for p in predicates)]
