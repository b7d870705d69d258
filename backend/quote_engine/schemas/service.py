from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel

from ..pricing.calculator import PriceBreakdown
from ..pricing.catalog import Addon, ComplexityTier, Currency, PriceRange, PricingRules, Service
from ..pricing.classifier import ComplexityScore


class PriceRangeResponse(BaseModel):
    min: Decimal
    max: Decimal

    @classmethod
    def from_range(cls, price_range: Optional[PriceRange]) -> Optional["PriceRangeResponse"]:
        if price_range is None:
            return None
        return cls(min=price_range.min, max=price_range.max)


class ComplexityLevelResponse(BaseModel):
    description: str
    multiplier: Decimal
    features: List[str]


class ServiceResponse(BaseModel):
    name: str
    description: str
    category: str
    features: List[str]
    base_price: Dict[str, Decimal]
    price_range: Dict[str, PriceRangeResponse]
    complexity: Dict[str, ComplexityLevelResponse]
    timeline: str
    options: Dict[str, List[str]] = {}

    @classmethod
    def from_service(cls, service: Service) -> "ServiceResponse":
        return cls(
            name=service.name,
            description=service.description,
            category=service.category,
            features=list(service.features),
            base_price=dict(service.base_price),
            price_range={
                code: PriceRangeResponse(min=r.min, max=r.max)
                for code, r in service.price_range.items()
            },
            complexity={
                tier: ComplexityLevelResponse(
                    description=level.description,
                    multiplier=level.multiplier,
                    features=list(level.features),
                )
                for tier, level in service.complexity.items()
            },
            timeline=service.timeline,
            options={key: list(values) for key, values in service.options.items()},
        )


class AddonTierResponse(BaseModel):
    name: str
    prices: Dict[str, Decimal]
    period: str


class AddonResponse(BaseModel):
    key: str
    name: str
    default_tier: str
    tiers: List[AddonTierResponse]

    @classmethod
    def from_addon(cls, addon: Addon) -> "AddonResponse":
        return cls(
            key=addon.key,
            name=addon.name,
            default_tier=addon.default_tier.name,
            tiers=[
                AddonTierResponse(name=t.name, prices=dict(t.prices), period=t.period)
                for t in addon.tiers
            ],
        )


class CurrencyResponse(BaseModel):
    code: str
    symbol: str
    name: str

    @classmethod
    def from_currency(cls, currency: Currency) -> "CurrencyResponse":
        return cls(code=currency.code, symbol=currency.symbol, name=currency.name)


class CatalogResponse(BaseModel):
    services: List[ServiceResponse]
    categories: List[str]
    timelines: List[str]
    currencies: List[CurrencyResponse]
    addons: List[AddonResponse]


class PricingRulesResponse(BaseModel):
    discounts: Dict[str, Decimal]
    rush_fees: Dict[str, Decimal]
    minimums: Dict[str, Decimal]

    @classmethod
    def from_rules(cls, rules: PricingRules) -> "PricingRulesResponse":
        return cls(
            discounts=dict(rules.discounts),
            rush_fees=dict(rules.rush_fees),
            minimums=dict(rules.minimums),
        )


class AppliedAddonResponse(BaseModel):
    key: str
    name: str
    tier: str
    price: Decimal
    currency: str
    period: str


class PriceBreakdownResponse(BaseModel):
    service: str
    complexity: ComplexityTier
    currency: str
    base_price: Decimal
    multiplier: Decimal
    service_price: Decimal
    addons: List[AppliedAddonResponse]
    addon_price: Decimal
    total_price: Decimal
    price_range: Optional[PriceRangeResponse] = None
    timeline: str

    @classmethod
    def from_breakdown(cls, breakdown: PriceBreakdown) -> "PriceBreakdownResponse":
        return cls(
            service=breakdown.service,
            complexity=breakdown.complexity,
            currency=breakdown.currency,
            base_price=breakdown.base_price,
            multiplier=breakdown.multiplier,
            service_price=breakdown.service_price,
            addons=[
                AppliedAddonResponse(
                    key=a.key,
                    name=a.name,
                    tier=a.tier,
                    price=a.price,
                    currency=a.currency,
                    period=a.period,
                )
                for a in breakdown.addons
            ],
            addon_price=breakdown.addon_price,
            total_price=breakdown.total_price,
            price_range=PriceRangeResponse.from_range(breakdown.price_range),
            timeline=breakdown.timeline,
        )


class ComplexityScoreResponse(BaseModel):
    score: int
    tier: ComplexityTier
    factors: Dict[str, int]

    @classmethod
    def from_score(cls, score: ComplexityScore) -> "ComplexityScoreResponse":
        return cls(score=score.score, tier=score.tier, factors=dict(score.factors))


class EstimateResponse(BaseModel):
    complexity: ComplexityTier
    recommended_amount: Decimal
    score: ComplexityScoreResponse
    breakdown: PriceBreakdownResponse
