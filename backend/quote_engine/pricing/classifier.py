from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict

from .requests import (
    DesignQuoteRequest,
    DevelopmentQuoteRequest,
    MarketingQuoteRequest,
    QuoteRequestBase,
)
from .catalog import ComplexityTier, Service

_TIMELINE_POINTS = {
    "6+ months": 2,
    "3-6 months": 1,
    "1-2 weeks": -1,
}

_LONG_CAMPAIGNS = ("12 Months", "Ongoing")

LONG_DESCRIPTION_CHARS = 500
ADVANCED_THRESHOLD = 4
INTERMEDIATE_THRESHOLD = 2


@dataclass(frozen=True)
class ComplexityScore:
    score: int
    tier: ComplexityTier
    factors: Dict[str, int] = field(default_factory=dict)


def tier_for_score(score: int) -> ComplexityTier:
    if score >= ADVANCED_THRESHOLD:
        return ComplexityTier.ADVANCED
    if score >= INTERMEDIATE_THRESHOLD:
        return ComplexityTier.INTERMEDIATE
    return ComplexityTier.BASIC


def _count_points(count: int, high: int, high_points: int = 2) -> int:
    """``high_points`` at ``high`` items or more, 1 point at two or more."""
    if count >= high:
        return high_points
    if count >= 2:
        return 1
    return 0


def _budget_points(request: QuoteRequestBase, service: Service) -> int:
    base = service.base_price_for(request.currency)
    if not base:
        return 0
    ratio = Decimal(request.budget) / base
    if ratio >= 3:
        return 2
    if ratio >= Decimal("1.5"):
        return 1
    return 0


def _service_points(request: QuoteRequestBase) -> int:
    if isinstance(request, DevelopmentQuoteRequest):
        features = request.features
        points = _count_points(len(features), 4)
        if "Authentication" in features:
            points += 1
        if "API" in features:
            points += 1
        return points
    if isinstance(request, DesignQuoteRequest):
        points = _count_points(len(request.design_type), 3)
        if len(request.platforms) >= 3:
            points += 1
        return points
    if isinstance(request, MarketingQuoteRequest):
        points = _count_points(len(request.marketing_channels), 4)
        if request.campaign_duration in _LONG_CAMPAIGNS:
            points += 1
        return points
    return 0


def score_complexity(request: QuoteRequestBase, service: Service) -> ComplexityScore:
    """Score a request and map it onto a complexity tier.

    Factors are additive: budget against the service's base price, the
    requested timeline, service-specific option counts and a long free-text
    description. The per-factor points are returned alongside the total so
    callers can explain the classification.
    """
    factors = {
        "budget": _budget_points(request, service),
        "timeline": _TIMELINE_POINTS.get(request.timeline, 0),
        "service": _service_points(request),
        "description": 1 if len(request.description or "") > LONG_DESCRIPTION_CHARS else 0,
    }
    score = sum(factors.values())
    return ComplexityScore(score=score, tier=tier_for_score(score), factors=factors)


def classify_complexity(request: QuoteRequestBase, service: Service) -> ComplexityTier:
    return score_complexity(request, service).tier
