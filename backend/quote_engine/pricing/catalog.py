"""Service and addon catalogs.

A :class:`PricingCatalog` is built once from plain data (see
:mod:`.catalog_data` or a JSON file) and never mutated afterwards. Services,
addons and their price tables are frozen dataclasses over read-only mappings,
so a catalog instance can be shared freely between threads and requests.
"""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from .errors import AddonNotFound, CatalogError, InvalidComplexity, ServiceNotFound


class ComplexityTier(str, enum.Enum):
    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


TIER_ORDER = (ComplexityTier.BASIC, ComplexityTier.INTERMEDIATE, ComplexityTier.ADVANCED)

# Tier label keys accepted in catalog data; development tiers list features,
# design tiers deliverables, marketing/consulting tiers services.
_TIER_LABEL_KEYS = ("features", "deliverables", "services")


def parse_tier(value: Any) -> ComplexityTier:
    """Return the tier for ``value`` or raise :class:`InvalidComplexity`."""
    if isinstance(value, ComplexityTier):
        return value
    try:
        return ComplexityTier(str(value).strip().lower())
    except ValueError:
        raise InvalidComplexity(
            f"Complexity must be one of: {', '.join(t.value for t in TIER_ORDER)}",
            value,
        ) from None


@dataclass(frozen=True)
class PriceRange:
    min: Decimal
    max: Decimal


@dataclass(frozen=True)
class ComplexityLevel:
    tier: ComplexityTier
    description: str
    multiplier: Decimal
    features: tuple[str, ...] = ()


@dataclass(frozen=True)
class Service:
    name: str
    description: str
    category: str
    features: tuple[str, ...]
    base_price: Mapping[str, Decimal]
    price_range: Mapping[str, PriceRange]
    complexity: Mapping[str, ComplexityLevel]
    timeline: str
    # Service-specific option vocabularies (design types, platforms, ...)
    options: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))

    def base_price_for(self, currency: str) -> Optional[Decimal]:
        return self.base_price.get(currency)

    def level(self, tier: Any) -> ComplexityLevel:
        parsed = parse_tier(tier)
        level = self.complexity.get(parsed.value)
        if level is None:
            raise InvalidComplexity(f"{self.name} has no '{parsed.value}' tier", tier)
        return level

    def multiplier_for(self, tier: Any) -> Decimal:
        return self.level(tier).multiplier


@dataclass(frozen=True)
class AddonTier:
    name: str
    prices: Mapping[str, Decimal]
    period: str

    def price_for(self, currency: str) -> Optional[Decimal]:
        return self.prices.get(currency)


@dataclass(frozen=True)
class Addon:
    key: str
    name: str
    tiers: tuple[AddonTier, ...]

    @property
    def default_tier(self) -> AddonTier:
        """``basic`` when declared, otherwise the first declared tier."""
        for tier in self.tiers:
            if tier.name == "basic":
                return tier
        return self.tiers[0]

    def tier(self, name: str) -> Optional[AddonTier]:
        for tier in self.tiers:
            if tier.name == name:
                return tier
        return None


@dataclass(frozen=True)
class Currency:
    code: str
    symbol: str
    name: str


@dataclass(frozen=True)
class PricingRules:
    """Published discount, rush-fee and minimum tables.

    These are informational: the calculator never applies them.
    """

    discounts: Mapping[str, Decimal]
    rush_fees: Mapping[str, Decimal]
    minimums: Mapping[str, Decimal]


@dataclass(frozen=True)
class PricingCatalog:
    services: tuple[Service, ...]
    addons: tuple[Addon, ...]
    currencies: tuple[Currency, ...]
    timelines: tuple[str, ...]
    categories: tuple[str, ...]
    rules: PricingRules
    _services_by_name: Mapping[str, Service] = field(init=False, repr=False, compare=False)
    _addons_by_key: Mapping[str, Addon] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_services_by_name", MappingProxyType({s.name: s for s in self.services})
        )
        object.__setattr__(
            self, "_addons_by_key", MappingProxyType({a.key: a for a in self.addons})
        )

    def list_services(self) -> list[Service]:
        return list(self.services)

    def find_service(self, name: str) -> Optional[Service]:
        return self._services_by_name.get(name)

    def get_service(self, name: str) -> Service:
        service = self.find_service(name)
        if service is None:
            raise ServiceNotFound("Service not found", name)
        return service

    def services_by_category(self, category: str) -> list[Service]:
        return [s for s in self.services if s.category == category]

    def find_addon(self, key: str) -> Optional[Addon]:
        return self._addons_by_key.get(key)

    def get_addon(self, key: str) -> Addon:
        addon = self.find_addon(key)
        if addon is None:
            raise AddonNotFound("Addon not found", key)
        return addon

    def currency_codes(self) -> list[str]:
        return [c.code for c in self.currencies]


# ─── Building from plain data ──────────────────────────────────────────────


def _to_decimal(value: Any, where: str) -> Decimal:
    if isinstance(value, bool):
        raise CatalogError(f"{where}: expected a number, got {value!r}")
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise CatalogError(f"{where}: expected a number, got {value!r}") from None


def _frozen_prices(raw: Mapping[str, Any], where: str, upper: bool = True) -> Mapping[str, Decimal]:
    return MappingProxyType(
        {
            (str(key).upper() if upper else str(key)): _to_decimal(amount, f"{where}.{key}")
            for key, amount in raw.items()
        }
    )


def _build_levels(name: str, raw: Mapping[str, Any]) -> Mapping[str, ComplexityLevel]:
    declared = set(raw or {})
    expected = {t.value for t in TIER_ORDER}
    if declared != expected:
        raise CatalogError(
            f"{name}: complexity tiers must be exactly {sorted(expected)}, got {sorted(declared)}"
        )
    levels: dict[str, ComplexityLevel] = {}
    previous = Decimal("1")
    for tier in TIER_ORDER:
        row = raw[tier.value] or {}
        multiplier = _to_decimal(row.get("multiplier"), f"{name}.{tier.value}.multiplier")
        if multiplier < previous:
            raise CatalogError(
                f"{name}: multiplier for '{tier.value}' ({multiplier}) must be >= {previous}"
            )
        previous = multiplier
        labels: Iterable[str] = ()
        for key in _TIER_LABEL_KEYS:
            if row.get(key):
                labels = row[key]
                break
        levels[tier.value] = ComplexityLevel(
            tier=tier,
            description=str(row.get("description") or ""),
            multiplier=multiplier,
            features=tuple(labels),
        )
    return MappingProxyType(levels)


def _build_service(raw: Mapping[str, Any]) -> Service:
    name = str(raw.get("name") or "").strip()
    if not name:
        raise CatalogError("Service entries need a name")
    price_range = {
        str(code).upper(): PriceRange(
            min=_to_decimal(bounds.get("min"), f"{name}.price_range.{code}.min"),
            max=_to_decimal(bounds.get("max"), f"{name}.price_range.{code}.max"),
        )
        for code, bounds in (raw.get("price_range") or {}).items()
    }
    options = {key: tuple(values) for key, values in (raw.get("options") or {}).items()}
    return Service(
        name=name,
        description=str(raw.get("description") or ""),
        category=str(raw.get("category") or ""),
        features=tuple(raw.get("features") or ()),
        base_price=_frozen_prices(raw.get("base_price") or {}, f"{name}.base_price"),
        price_range=MappingProxyType(price_range),
        complexity=_build_levels(name, raw.get("complexity") or {}),
        timeline=str(raw.get("timeline") or ""),
        options=MappingProxyType(options),
    )


def _build_addon(key: str, raw: Mapping[str, Any]) -> Addon:
    tiers = []
    for tier_name, row in (raw.get("prices") or {}).items():
        row = dict(row or {})
        period = str(row.pop("period", "") or "")
        tiers.append(
            AddonTier(
                name=str(tier_name),
                prices=_frozen_prices(row, f"addon {key}.{tier_name}"),
                period=period,
            )
        )
    if not tiers:
        raise CatalogError(f"Addon '{key}' must declare at least one price tier")
    return Addon(key=key, name=str(raw.get("name") or key), tiers=tuple(tiers))


def build_catalog(data: Mapping[str, Any]) -> PricingCatalog:
    """Validate plain catalog data and return an immutable :class:`PricingCatalog`."""
    services = tuple(_build_service(row) for row in (data.get("services") or []))
    names = [s.name for s in services]
    if len(names) != len(set(names)):
        raise CatalogError("Service names must be unique")
    addons = tuple(_build_addon(str(key), row) for key, row in (data.get("addons") or {}).items())
    currencies = tuple(
        Currency(code=str(code).upper(), symbol=str(row.get("symbol") or code), name=str(row.get("name") or code))
        for code, row in (data.get("currencies") or {}).items()
    )
    categories = tuple(data.get("categories") or sorted({s.category for s in services}))
    rules_raw = data.get("pricing_rules") or {}
    rules = PricingRules(
        discounts=_frozen_prices(rules_raw.get("discounts") or {}, "discounts", upper=False),
        rush_fees=_frozen_prices(rules_raw.get("rush_fees") or {}, "rush_fees", upper=False),
        minimums=_frozen_prices(rules_raw.get("minimums") or {}, "minimums"),
    )
    return PricingCatalog(
        services=services,
        addons=addons,
        currencies=currencies,
        timelines=tuple(data.get("timelines") or ()),
        categories=categories,
        rules=rules,
    )


def load_catalog_file(path: str | Path) -> PricingCatalog:
    """Build a catalog from a JSON document shaped like :data:`.catalog_data.DEFAULT_CATALOG`."""
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise CatalogError(f"{path}: catalog root must be a JSON object")
    return build_catalog(data)
