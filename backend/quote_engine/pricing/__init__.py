"""Pricing and complexity engine."""

from .catalog import (
    Addon,
    AddonTier,
    ComplexityLevel,
    ComplexityTier,
    PricingCatalog,
    Service,
    build_catalog,
    load_catalog_file,
)
from .calculator import AppliedAddon, PriceBreakdown, calculate_price
from .classifier import ComplexityScore, classify_complexity, score_complexity
from .engine import PricingEngine, QuoteEstimate, addon_keys_for, default_catalog, load_catalog
from .errors import (
    AddonNotFound,
    CatalogError,
    InvalidComplexity,
    InvalidQuoteAmount,
    InvalidStatus,
    PricingError,
    ServiceNotFound,
    UnsupportedCurrency,
)
from .requests import (
    DesignQuoteRequest,
    DevelopmentQuoteRequest,
    GeneralQuoteRequest,
    MarketingQuoteRequest,
    QuoteRequest,
    QuoteRequestBase,
    parse_quote_request,
    request_from_record,
)
from .lifecycle import QuoteStatus, StatusTransition, mark_quoted, transition_status

__all__ = [
    "Addon",
    "AddonTier",
    "ComplexityLevel",
    "ComplexityTier",
    "PricingCatalog",
    "Service",
    "build_catalog",
    "load_catalog_file",
    "AppliedAddon",
    "PriceBreakdown",
    "calculate_price",
    "ComplexityScore",
    "classify_complexity",
    "score_complexity",
    "PricingEngine",
    "QuoteEstimate",
    "addon_keys_for",
    "default_catalog",
    "load_catalog",
    "AddonNotFound",
    "CatalogError",
    "InvalidComplexity",
    "InvalidQuoteAmount",
    "InvalidStatus",
    "PricingError",
    "ServiceNotFound",
    "UnsupportedCurrency",
    "DesignQuoteRequest",
    "DevelopmentQuoteRequest",
    "GeneralQuoteRequest",
    "MarketingQuoteRequest",
    "QuoteRequest",
    "QuoteRequestBase",
    "parse_quote_request",
    "request_from_record",
    "QuoteStatus",
    "StatusTransition",
    "mark_quoted",
    "transition_status",
]
