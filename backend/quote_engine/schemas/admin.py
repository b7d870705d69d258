from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from .quote import QuoteRead


class BulkQuoteIds(BaseModel):
    # Emptiness is reported by the router as a 400
    quote_ids: List[int] = Field(
        default_factory=list,
        validation_alias=AliasChoices("quote_ids", "quoteIds"),
    )


class BulkStatusUpdate(BulkQuoteIds):
    status: str
    notes: Optional[str] = Field(default=None, max_length=1000)


class BulkUpdateResult(BaseModel):
    modified_count: int


class BulkDeleteResult(BaseModel):
    deleted_count: int


class DashboardOverview(BaseModel):
    total_quotes: int
    pending_quotes: int
    quoted_quotes: int
    accepted_quotes: int
    completed_quotes: int
    rejected_quotes: int


class ServiceRevenueStats(BaseModel):
    service: str
    count: int
    avg_budget: Optional[float] = None
    total_revenue: float = 0


class MonthlyQuoteStats(BaseModel):
    year: int
    month: int
    count: int
    revenue: float = 0


class AdminDashboard(BaseModel):
    overview: DashboardOverview
    recent_quotes: List[QuoteRead]
    service_stats: List[ServiceRevenueStats]
    monthly_stats: List[MonthlyQuoteStats]


class QuoteExportResponse(BaseModel):
    quotes: List[QuoteRead]
    total: int
    exported_at: datetime
