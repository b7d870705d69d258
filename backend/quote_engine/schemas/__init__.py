from ..pricing.requests import (
    QuoteRequest,
    QuoteRequestBase,
    DevelopmentQuoteRequest,
    DesignQuoteRequest,
    MarketingQuoteRequest,
    GeneralQuoteRequest,
    parse_quote_request,
)
from .service import (
    ServiceResponse,
    AddonResponse,
    CurrencyResponse,
    CatalogResponse,
    PricingRulesResponse,
    PriceBreakdownResponse,
    ComplexityScoreResponse,
    EstimateResponse,
)
from .quote import (
    QuoteCreate,
    QuoteRead,
    QuoteStatusUpdate,
    QuoteAmountIn,
    QuotePriceIn,
    QuotePriceResponse,
    QuoteListResponse,
    QuoteStats,
)
from .admin import (
    BulkQuoteIds,
    BulkStatusUpdate,
    BulkUpdateResult,
    BulkDeleteResult,
    AdminDashboard,
    QuoteExportResponse,
)

__all__ = [
    "QuoteRequest",
    "QuoteRequestBase",
    "DevelopmentQuoteRequest",
    "DesignQuoteRequest",
    "MarketingQuoteRequest",
    "GeneralQuoteRequest",
    "parse_quote_request",
    "ServiceResponse",
    "AddonResponse",
    "CurrencyResponse",
    "CatalogResponse",
    "PricingRulesResponse",
    "PriceBreakdownResponse",
    "ComplexityScoreResponse",
    "EstimateResponse",
    "QuoteCreate",
    "QuoteRead",
    "QuoteStatusUpdate",
    "QuoteAmountIn",
    "QuotePriceIn",
    "QuotePriceResponse",
    "QuoteListResponse",
    "QuoteStats",
    "BulkQuoteIds",
    "BulkStatusUpdate",
    "BulkUpdateResult",
    "BulkDeleteResult",
    "AdminDashboard",
    "QuoteExportResponse",
]
