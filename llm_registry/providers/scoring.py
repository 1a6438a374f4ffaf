# -*- coding: utf-8 -*-
"""Threshold bucketing of upstream benchmarks into 0-5 scores."""

from __future__ import annotations

from typing import Optional, Sequence

# Lower bounds for scores 5, 4, 3, 2, 1 (anything below scores 0).
IQ_THRESHOLDS: Sequence[float] = (65, 55, 45, 35, 25)
SPEED_THRESHOLDS: Sequence[float] = (300, 200, 100, 50, 25)


def _bucket(value: Optional[float], thresholds: Sequence[float]) -> int:
    if not value:
        return 0
    for i, bound in enumerate(thresholds):
        if value >= bound:
            return len(thresholds) - i
    return 0


def score_iq(intelligence_index: Optional[float]) -> int:
    """Score the Artificial Analysis intelligence index."""
    return _bucket(intelligence_index, IQ_THRESHOLDS)


def score_speed(tokens_per_sec: Optional[float]) -> int:
    """Score median output tokens per second."""
    return _bucket(tokens_per_sec, SPEED_THRESHOLDS)
