import enum
from sqlalchemy import (
    Column,
    Integer,
    Numeric,
    String,
    Text,
    JSON,
    Enum as SQLAlchemyEnum,
)

from .base import BaseModel
from ..pricing.lifecycle import QuoteStatus


class QuotePriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class Quote(BaseModel):
    __tablename__ = "quotes"

    id = Column(Integer, primary_key=True, index=True)

    # Contact
    name = Column(String(100), nullable=False)
    email = Column(String, nullable=False, index=True)
    phone = Column(String(20), nullable=False)
    company = Column(String(100), nullable=True)

    # Request
    service = Column(String, nullable=False, index=True)
    timeline = Column(String, nullable=False)
    budget = Column(Numeric(12, 2), nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    description = Column(Text, nullable=True)

    # Development services
    features = Column(JSON, nullable=False, default=list)
    hosting = Column(String, nullable=True)
    domain = Column(String, nullable=True)
    maintenance = Column(String, nullable=True)

    # Design services
    design_type = Column(JSON, nullable=False, default=list)
    platforms = Column(JSON, nullable=False, default=list)
    pages = Column(String(50), nullable=True)

    # Marketing services
    marketing_channels = Column(JSON, nullable=False, default=list)
    campaign_duration = Column(String, nullable=True)
    target_audience = Column(String(1000), nullable=True)

    # Workflow
    # Persist lowercase values so the column matches the API labels
    status = Column(
        SQLAlchemyEnum(
            QuoteStatus,
            name="quotestatus",
            values_callable=lambda enum: [e.value for e in enum],
        ),
        nullable=False,
        default=QuoteStatus.PENDING,
        index=True,
    )
    priority = Column(
        SQLAlchemyEnum(
            QuotePriority,
            name="quotepriority",
            values_callable=lambda enum: [e.value for e in enum],
        ),
        nullable=False,
        default=QuotePriority.MEDIUM,
    )
    complexity = Column(String, nullable=True)
    notes = Column(String(1000), nullable=True)
    quoted_amount = Column(Numeric(12, 2), nullable=True)
    quoted_currency = Column(String(3), nullable=True)
    assigned_to = Column(String, nullable=True)
