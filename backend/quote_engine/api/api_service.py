from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, Query, Response, status

from .dependencies import get_pricing_engine
from ..pricing import PricingEngine, PricingError, ServiceNotFound
from ..schemas.service import (
    AddonResponse,
    CatalogResponse,
    CurrencyResponse,
    PriceBreakdownResponse,
    PricingRulesResponse,
    ServiceResponse,
)
from ..utils import error_response, pricing_error_response

router = APIRouter(tags=["services"])
logger = logging.getLogger(__name__)

# Catalog data only changes with a deploy
CATALOG_CACHE_CONTROL = "public, max-age=3600"


def _split_addons(raw: Optional[List[str]]) -> list[str]:
    """Accept ``?addons=a,b`` as well as repeated ``?addons=a&addons=b``."""
    keys: list[str] = []
    for item in raw or []:
        keys.extend(part.strip() for part in item.split(",") if part.strip())
    return keys


@router.get("/", response_model=CatalogResponse)
def list_services(response: Response, engine: PricingEngine = Depends(get_pricing_engine)):
    catalog = engine.catalog
    response.headers["Cache-Control"] = CATALOG_CACHE_CONTROL
    return CatalogResponse(
        services=[ServiceResponse.from_service(s) for s in engine.list_services()],
        categories=list(catalog.categories),
        timelines=list(catalog.timelines),
        currencies=[CurrencyResponse.from_currency(c) for c in catalog.currencies],
        addons=[AddonResponse.from_addon(a) for a in catalog.addons],
    )


@router.get("/categories", response_model=list[str])
def list_categories(engine: PricingEngine = Depends(get_pricing_engine)):
    return list(engine.catalog.categories)


@router.get("/category/{category}", response_model=list[ServiceResponse])
def services_in_category(category: str, engine: PricingEngine = Depends(get_pricing_engine)):
    if category not in engine.catalog.categories:
        raise error_response(
            "Invalid service category",
            {"category": "invalid"},
            status.HTTP_400_BAD_REQUEST,
        )
    return [ServiceResponse.from_service(s) for s in engine.services_by_category(category)]


@router.get("/meta/timelines", response_model=list[str])
def list_timelines(engine: PricingEngine = Depends(get_pricing_engine)):
    return list(engine.catalog.timelines)


@router.get("/meta/currencies", response_model=list[CurrencyResponse])
def list_currencies(engine: PricingEngine = Depends(get_pricing_engine)):
    return [CurrencyResponse.from_currency(c) for c in engine.catalog.currencies]


@router.get("/meta/addons", response_model=list[AddonResponse])
def list_addons(engine: PricingEngine = Depends(get_pricing_engine)):
    return [AddonResponse.from_addon(a) for a in engine.catalog.addons]


@router.get("/meta/pricing-rules", response_model=PricingRulesResponse)
def pricing_rules(engine: PricingEngine = Depends(get_pricing_engine)):
    """Published discount and rush-fee tables (not applied to estimates)."""
    return PricingRulesResponse.from_rules(engine.catalog.rules)


@router.post("/calculate-price", response_model=PriceBreakdownResponse)
def calculate_price(
    service: str = Query(..., min_length=1),
    complexity: Optional[str] = Query(None),
    currency: Optional[str] = Query(None),
    addons: Optional[List[str]] = Query(None),
    engine: PricingEngine = Depends(get_pricing_engine),
):
    try:
        breakdown = engine.calculate_price(service, complexity, currency, _split_addons(addons))
    except PricingError as exc:
        raise pricing_error_response(exc)
    logger.info(
        "Calculated %s %s for %s (%s)",
        breakdown.currency,
        breakdown.total_price,
        breakdown.service,
        breakdown.complexity.value,
    )
    return PriceBreakdownResponse.from_breakdown(breakdown)


# Service names may contain "/" (e.g. "UI/UX Design"), so this route matches
# the rest of the path and must stay last.
@router.get("/{service_name:path}", response_model=ServiceResponse)
def get_service(service_name: str, engine: PricingEngine = Depends(get_pricing_engine)):
    try:
        service = engine.get_service(service_name)
    except ServiceNotFound as exc:
        raise pricing_error_response(exc, status.HTTP_404_NOT_FOUND)
    return ServiceResponse.from_service(service)
