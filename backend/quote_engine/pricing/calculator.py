from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Optional

from .catalog import ComplexityTier, PriceRange, PricingCatalog, parse_tier
from .errors import UnsupportedCurrency

_UNIT = Decimal("1")


@dataclass(frozen=True)
class AppliedAddon:
    key: str
    name: str
    tier: str
    price: Decimal
    currency: str
    period: str


@dataclass(frozen=True)
class PriceBreakdown:
    service: str
    complexity: ComplexityTier
    currency: str
    base_price: Decimal
    multiplier: Decimal
    service_price: Decimal
    addons: tuple[AppliedAddon, ...]
    addon_price: Decimal
    total_price: Decimal
    price_range: Optional[PriceRange]
    timeline: str


def round_to_unit(amount: Decimal) -> Decimal:
    """Round half-up to a whole currency unit."""
    return amount.quantize(_UNIT, rounding=ROUND_HALF_UP)


def _unique(keys: Iterable[Any]) -> list[str]:
    seen: set[str] = set()
    ordered: list[str] = []
    for key in keys:
        k = str(key).strip()
        if not k or k in seen:
            continue
        seen.add(k)
        ordered.append(k)
    return ordered


def calculate_price(
    catalog: PricingCatalog,
    service_name: str,
    complexity: Any = ComplexityTier.BASIC,
    currency: str = "USD",
    addons: Optional[Iterable[str]] = None,
) -> PriceBreakdown:
    """Compose base price, tier multiplier and addon prices into a breakdown.

    Raises ``ServiceNotFound`` for an unknown service, ``UnsupportedCurrency``
    when the service (or a requested addon) has no price in ``currency`` and
    ``InvalidComplexity`` for a tier label outside basic/intermediate/advanced.
    Unknown addon keys are skipped; repeated keys are priced once.
    """
    currency = str(currency).strip().upper()
    service = catalog.get_service(service_name)
    base_price = service.base_price_for(currency)
    if base_price is None:
        raise UnsupportedCurrency(f"{service.name} is not priced in {currency}", currency)
    tier = parse_tier(complexity)
    multiplier = service.multiplier_for(tier)
    service_price = round_to_unit(base_price * multiplier)

    applied: list[AppliedAddon] = []
    for key in _unique(addons or ()):
        addon = catalog.find_addon(key)
        if addon is None:
            continue
        default = addon.default_tier
        price = default.price_for(currency)
        if price is None:
            raise UnsupportedCurrency(f"{addon.name} is not priced in {currency}", currency)
        applied.append(
            AppliedAddon(
                key=addon.key,
                name=addon.name,
                tier=default.name,
                price=price,
                currency=currency,
                period=default.period,
            )
        )

    addon_price = sum((a.price for a in applied), Decimal("0"))
    return PriceBreakdown(
        service=service.name,
        complexity=tier,
        currency=currency,
        base_price=base_price,
        multiplier=multiplier,
        service_price=service_price,
        addons=tuple(applied),
        addon_price=addon_price,
        total_price=service_price + addon_price,
        price_range=service.price_range.get(currency),
        timeline=service.timeline,
    )
