from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, List, Optional, Union

from pydantic import BaseModel, Discriminator, EmailStr, Field, Tag, field_validator, model_validator

from ..models.quote import QuotePriority
from ..pricing.lifecycle import QuoteStatus
from ..pricing.requests import (
    DesignQuoteRequest,
    DevelopmentQuoteRequest,
    GeneralQuoteRequest,
    MarketingQuoteRequest,
    request_kind,
)
from .service import PriceBreakdownResponse, ComplexityScoreResponse


class ContactDetails(BaseModel):
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    phone: str = Field(pattern=r"^\+?[1-9]\d{0,15}$")
    company: Optional[str] = Field(default=None, max_length=100)

    @field_validator("name", "phone", "company", mode="before")
    def strip_text(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("email", mode="before")
    def lower_email(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def require_description(self):
        if len(getattr(self, "description", None) or "") < 10:
            raise ValueError("Project description must be between 10 and 2000 characters")
        return self


class DevelopmentQuoteCreate(ContactDetails, DevelopmentQuoteRequest):
    @model_validator(mode="after")
    def require_delivery_options(self) -> "DevelopmentQuoteCreate":
        if not (self.hosting and self.domain and self.maintenance):
            raise ValueError("Hosting, domain, and maintenance fields are required for this service")
        return self


class DesignQuoteCreate(ContactDetails, DesignQuoteRequest):
    @model_validator(mode="after")
    def require_design_options(self) -> "DesignQuoteCreate":
        if not (self.pages and self.design_type and self.platforms):
            raise ValueError("Design type, platforms, and pages are required for UI/UX Design service")
        return self


class MarketingQuoteCreate(ContactDetails, MarketingQuoteRequest):
    @model_validator(mode="after")
    def require_campaign_options(self) -> "MarketingQuoteCreate":
        if not (self.campaign_duration and self.target_audience and self.marketing_channels):
            raise ValueError(
                "Marketing channels, campaign duration, and target audience are required for Digital Marketing service"
            )
        return self


class GeneralQuoteCreate(ContactDetails, GeneralQuoteRequest):
    pass


QuoteCreate = Annotated[
    Union[
        Annotated[DevelopmentQuoteCreate, Tag("development")],
        Annotated[DesignQuoteCreate, Tag("design")],
        Annotated[MarketingQuoteCreate, Tag("marketing")],
        Annotated[GeneralQuoteCreate, Tag("general")],
    ],
    Discriminator(request_kind),
]


class QuoteRead(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    company: Optional[str] = None
    service: str
    timeline: str
    budget: Decimal
    currency: str
    description: Optional[str] = None
    features: List[str] = []
    hosting: Optional[str] = None
    domain: Optional[str] = None
    maintenance: Optional[str] = None
    design_type: List[str] = []
    platforms: List[str] = []
    pages: Optional[str] = None
    marketing_channels: List[str] = []
    campaign_duration: Optional[str] = None
    target_audience: Optional[str] = None
    status: QuoteStatus
    priority: QuotePriority
    complexity: Optional[str] = None
    notes: Optional[str] = None
    quoted_amount: Optional[Decimal] = None
    quoted_currency: Optional[str] = None
    assigned_to: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class QuoteStatusUpdate(BaseModel):
    # Validated by the lifecycle so unknown labels surface as InvalidStatus
    status: str
    notes: Optional[str] = Field(default=None, max_length=1000)
    priority: Optional[QuotePriority] = None
    assigned_to: Optional[str] = Field(default=None, max_length=100)


class QuoteAmountIn(BaseModel):
    amount: Decimal
    currency: str = "USD"
    notes: Optional[str] = Field(default=None, max_length=1000)


class QuotePriceIn(BaseModel):
    """Options for auto-pricing a stored quote."""

    complexity: Optional[str] = None
    addons: Optional[List[str]] = None
    notes: Optional[str] = Field(default="auto-priced", max_length=1000)


class QuotePriceResponse(BaseModel):
    quote: QuoteRead
    breakdown: PriceBreakdownResponse
    score: Optional[ComplexityScoreResponse] = None


class Pagination(BaseModel):
    current_page: int
    total_pages: int
    total_quotes: int
    has_next_page: bool
    has_prev_page: bool


class QuoteListResponse(BaseModel):
    quotes: List[QuoteRead]
    pagination: Pagination


class ServiceQuoteStats(BaseModel):
    service: str
    count: int
    avg_budget: Optional[float] = None


class QuoteOverview(BaseModel):
    total_quotes: int
    pending_quotes: int
    quoted_quotes: int
    accepted_quotes: int
    completed_quotes: int


class QuoteStats(BaseModel):
    overview: QuoteOverview
    service_stats: List[ServiceQuoteStats]
    recent_quotes: List[QuoteRead]
