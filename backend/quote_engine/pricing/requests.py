"""Quote request payloads.

A request is a tagged union keyed by the service name: development,
design and marketing services each accept their own option fields, every
other service only the common ones. Payloads are frozen and reject fields
that do not belong to their variant.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    field_validator,
    model_validator,
)

DEVELOPMENT_SERVICES = ("Web Development", "Mobile App Design")
DESIGN_SERVICES = ("UI/UX Design",)
MARKETING_SERVICES = ("Digital Marketing",)

Feature = Literal["Frontend", "Backend", "Database", "API", "Authentication"]
YesNoAdvice = Literal["Yes", "No", "Advice"]
MaintenancePlan = Literal["None", "Monthly", "Quarterly", "Yearly", "Custom"]
DesignType = Literal["Website", "Mobile App", "Dashboard", "Branding"]
Platform = Literal["Desktop", "Tablet", "Mobile"]
MarketingChannel = Literal["Social Media", "SEO", "Content Marketing", "Email Marketing", "PPC"]
CampaignDuration = Literal["1 Month", "3 Months", "6 Months", "12 Months", "Ongoing"]


def request_kind(value: Any) -> str:
    """Return the union tag for a raw payload or a parsed request."""
    if isinstance(value, dict):
        service = value.get("service")
    else:
        service = getattr(value, "service", None)
    if service in DEVELOPMENT_SERVICES:
        return "development"
    if service in DESIGN_SERVICES:
        return "design"
    if service in MARKETING_SERVICES:
        return "marketing"
    return "general"


class QuoteRequestBase(BaseModel):
    service: str = Field(min_length=1)
    currency: str = "USD"
    budget: Decimal = Field(ge=0)
    timeline: str = Field(min_length=1)
    description: Optional[str] = Field(default=None, max_length=2000)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("currency", mode="before")
    def normalize_currency(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("description", mode="before")
    def strip_description(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @property
    def kind(self) -> str:
        return request_kind(self)


class DevelopmentQuoteRequest(QuoteRequestBase):
    features: tuple[Feature, ...] = ()
    hosting: Optional[YesNoAdvice] = None
    domain: Optional[YesNoAdvice] = None
    maintenance: Optional[MaintenancePlan] = None

    @model_validator(mode="after")
    def check_service(self) -> "DevelopmentQuoteRequest":
        if self.service not in DEVELOPMENT_SERVICES:
            raise ValueError(f"{self.service} is not a development service")
        return self


class DesignQuoteRequest(QuoteRequestBase):
    design_type: tuple[DesignType, ...] = ()
    platforms: tuple[Platform, ...] = ()
    pages: Optional[str] = Field(default=None, max_length=50)

    @model_validator(mode="after")
    def check_service(self) -> "DesignQuoteRequest":
        if self.service not in DESIGN_SERVICES:
            raise ValueError(f"{self.service} is not a design service")
        return self


class MarketingQuoteRequest(QuoteRequestBase):
    marketing_channels: tuple[MarketingChannel, ...] = ()
    campaign_duration: Optional[CampaignDuration] = None
    target_audience: Optional[str] = Field(default=None, max_length=1000)

    @model_validator(mode="after")
    def check_service(self) -> "MarketingQuoteRequest":
        if self.service not in MARKETING_SERVICES:
            raise ValueError(f"{self.service} is not a marketing service")
        return self


class GeneralQuoteRequest(QuoteRequestBase):
    @model_validator(mode="after")
    def check_service(self) -> "GeneralQuoteRequest":
        if request_kind(self) != "general":
            raise ValueError(f"{self.service} needs its service-specific request shape")
        return self


QuoteRequest = Annotated[
    Union[
        Annotated[DevelopmentQuoteRequest, Tag("development")],
        Annotated[DesignQuoteRequest, Tag("design")],
        Annotated[MarketingQuoteRequest, Tag("marketing")],
        Annotated[GeneralQuoteRequest, Tag("general")],
    ],
    Discriminator(request_kind),
]

quote_request_adapter: TypeAdapter[Any] = TypeAdapter(QuoteRequest)


def parse_quote_request(data: Any) -> QuoteRequestBase:
    """Validate a raw mapping into the matching request variant."""
    return quote_request_adapter.validate_python(data)


VARIANT_FIELDS = {
    "development": ("features", "hosting", "domain", "maintenance"),
    "design": ("design_type", "platforms", "pages"),
    "marketing": ("marketing_channels", "campaign_duration", "target_audience"),
    "general": (),
}

_COMMON_FIELDS = ("service", "currency", "budget", "timeline", "description")


def request_from_record(record: Any) -> QuoteRequestBase:
    """Rebuild the request variant from a stored quote-like object.

    Only the fields of the matching variant are read; empty values are
    left to the variant's defaults.
    """
    kind = request_kind(record)
    data = {}
    for name in _COMMON_FIELDS + VARIANT_FIELDS[kind]:
        value = getattr(record, name, None)
        if value is None:
            continue
        if isinstance(value, list):
            value = tuple(value)
        data[name] = value
    return parse_quote_request(data)
