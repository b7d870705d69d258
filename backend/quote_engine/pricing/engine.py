from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Iterable, Optional

from .requests import DevelopmentQuoteRequest, QuoteRequestBase
from .calculator import PriceBreakdown, calculate_price
from .catalog import ComplexityTier, PricingCatalog, Service, build_catalog, load_catalog_file
from .catalog_data import DEFAULT_CATALOG
from .classifier import ComplexityScore, score_complexity
from .errors import UnsupportedCurrency

_MAINTENANCE_PLANS = ("Monthly", "Quarterly", "Yearly")


@dataclass(frozen=True)
class QuoteEstimate:
    score: ComplexityScore
    breakdown: PriceBreakdown

    @property
    def complexity(self) -> ComplexityTier:
        return self.score.tier

    @property
    def recommended_amount(self):
        return self.breakdown.total_price


def addon_keys_for(request: QuoteRequestBase) -> list[str]:
    """Addons implied by a request's hosting/domain/maintenance answers."""
    if not isinstance(request, DevelopmentQuoteRequest):
        return []
    keys = []
    if request.hosting == "Yes":
        keys.append("hosting")
    if request.domain == "Yes":
        keys.append("domain")
    if request.maintenance in _MAINTENANCE_PLANS:
        keys.append("maintenance")
    return keys


class PricingEngine:
    """Catalog-bound entry point for classification and pricing.

    Holds no state besides the injected catalog, so one instance serves
    concurrent callers.
    """

    def __init__(self, catalog: PricingCatalog, default_currency: str = "USD"):
        self.catalog = catalog
        self.default_currency = default_currency.strip().upper()
        if self.catalog.currencies and self.default_currency not in self.catalog.currency_codes():
            raise UnsupportedCurrency(
                f"Default currency {self.default_currency} is not in the catalog",
                self.default_currency,
            )

    def list_services(self) -> list[Service]:
        return self.catalog.list_services()

    def get_service(self, name: str) -> Service:
        return self.catalog.get_service(name)

    def services_by_category(self, category: str) -> list[Service]:
        return self.catalog.services_by_category(category)

    def score(self, request: QuoteRequestBase) -> ComplexityScore:
        return score_complexity(request, self.get_service(request.service))

    def classify(self, request: QuoteRequestBase) -> ComplexityTier:
        return self.score(request).tier

    def calculate_price(
        self,
        service_name: str,
        complexity: Any = None,
        currency: Optional[str] = None,
        addons: Optional[Iterable[str]] = None,
    ) -> PriceBreakdown:
        return calculate_price(
            self.catalog,
            service_name,
            complexity if complexity is not None else ComplexityTier.BASIC,
            currency or self.default_currency,
            addons or [],
        )

    def estimate(
        self, request: QuoteRequestBase, addons: Optional[Iterable[str]] = None
    ) -> QuoteEstimate:
        """Classify ``request`` and price it at the resulting tier.

        Without explicit ``addons`` the request's own answers decide which
        addons are included.
        """
        score = self.score(request)
        breakdown = self.calculate_price(
            request.service,
            score.tier,
            request.currency,
            addon_keys_for(request) if addons is None else addons,
        )
        return QuoteEstimate(score=score, breakdown=breakdown)


@lru_cache(maxsize=1)
def default_catalog() -> PricingCatalog:
    return build_catalog(DEFAULT_CATALOG)


def load_catalog(path: Optional[str] = None) -> PricingCatalog:
    if path:
        return load_catalog_file(path)
    return default_catalog()
