from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional
import logging
import math

from sqlalchemy import extract, func
from sqlalchemy.orm import Session

from .. import models
from ..pricing import (
    PricingEngine,
    PriceBreakdown,
    ComplexityScore,
    UnsupportedCurrency,
    QuoteStatus,
    addon_keys_for,
    mark_quoted,
    request_from_record,
    transition_status,
)
from ..pricing.lifecycle import parse_status, StatusTransition
from ..pricing.requests import QuoteRequestBase

logger = logging.getLogger(__name__)

SORTABLE_COLUMNS = {
    "created_at": models.Quote.created_at,
    "updated_at": models.Quote.updated_at,
    "budget": models.Quote.budget,
    "status": models.Quote.status,
    "priority": models.Quote.priority,
}


def _check_currency(engine: PricingEngine, currency: str) -> None:
    codes = engine.catalog.currency_codes()
    if codes and currency not in codes:
        raise UnsupportedCurrency(f"Currency must be one of: {', '.join(codes)}", currency)


def create_quote(db: Session, quote_in: QuoteRequestBase, engine: PricingEngine) -> models.Quote:
    """Persist a new quote request with its classified complexity."""
    _check_currency(engine, quote_in.currency)
    tier = engine.classify(quote_in)
    data = {
        key: list(value) if isinstance(value, tuple) else value
        for key, value in quote_in.model_dump().items()
    }
    db_quote = models.Quote(
        **data,
        status=QuoteStatus.PENDING,
        complexity=tier.value,
    )
    db.add(db_quote)
    db.commit()
    db.refresh(db_quote)
    logger.info(
        "Created quote %s for %s (complexity=%s)", db_quote.id, db_quote.service, tier.value
    )
    return db_quote


def get_quote(db: Session, quote_id: int) -> Optional[models.Quote]:
    return db.query(models.Quote).filter(models.Quote.id == quote_id).first()


def list_quotes(
    db: Session,
    *,
    page: int = 1,
    limit: int = 10,
    status: Optional[str] = None,
    service: Optional[str] = None,
    sort_by: str = "created_at",
    sort_order: str = "desc",
) -> tuple[list[models.Quote], int]:
    """Return one page of quotes and the total matching count."""
    query = db.query(models.Quote)
    if status:
        query = query.filter(models.Quote.status == parse_status(status))
    if service:
        query = query.filter(models.Quote.service == service)
    total = query.count()

    column = SORTABLE_COLUMNS.get(sort_by, models.Quote.created_at)
    ordering = column.asc() if sort_order == "asc" else column.desc()
    quotes = (
        query.order_by(ordering, models.Quote.id.desc())
        .offset((max(page, 1) - 1) * limit)
        .limit(limit)
        .all()
    )
    return quotes, total


def get_quotes_by_service(
    db: Session, service: str, *, page: int = 1, limit: int = 10
) -> tuple[list[models.Quote], int]:
    return list_quotes(db, page=page, limit=limit, service=service)


def pagination(page: int, limit: int, total: int) -> dict:
    total_pages = math.ceil(total / limit) if limit else 0
    return {
        "current_page": page,
        "total_pages": total_pages,
        "total_quotes": total,
        "has_next_page": page < total_pages,
        "has_prev_page": page > 1,
    }


def _apply_transition(quote: models.Quote, transition: StatusTransition) -> None:
    quote.status = transition.status
    # Keep the previous note when the transition carries none
    if transition.note:
        quote.notes = transition.note


def update_status(
    db: Session,
    quote: models.Quote,
    status: str,
    notes: Optional[str] = None,
    *,
    priority: Optional[models.QuotePriority] = None,
    assigned_to: Optional[str] = None,
) -> models.Quote:
    """Move a quote to ``status``; priority and assignee change only when given."""
    transition = transition_status(quote.status, status, notes)
    _apply_transition(quote, transition)
    if priority is not None:
        quote.priority = priority
    if assigned_to is not None:
        quote.assigned_to = assigned_to.strip() or None
    db.commit()
    db.refresh(quote)
    logger.info(
        "Quote %s status %s -> %s",
        quote.id,
        transition.previous.value if transition.previous else None,
        transition.status.value,
    )
    return quote


def add_quote_amount(
    db: Session,
    quote: models.Quote,
    amount: Decimal,
    currency: str,
    engine: PricingEngine,
    notes: Optional[str] = None,
) -> models.Quote:
    """Record a manually decided amount; the quote moves to ``quoted``."""
    quoted = mark_quoted(quote.status, amount, currency, notes)
    _check_currency(engine, quoted.currency)
    quote.quoted_amount = quoted.amount
    quote.quoted_currency = quoted.currency
    _apply_transition(quote, quoted.transition)
    db.commit()
    db.refresh(quote)
    logger.info("Quote %s quoted at %s %s", quote.id, quoted.currency, quoted.amount)
    return quote


def price_quote(
    db: Session,
    quote: models.Quote,
    engine: PricingEngine,
    *,
    complexity: Optional[str] = None,
    addons: Optional[Iterable[str]] = None,
    notes: Optional[str] = "auto-priced",
) -> tuple[models.Quote, PriceBreakdown, Optional[ComplexityScore]]:
    """Price a stored quote with the engine and accept the total.

    Without an explicit ``complexity`` the stored request is classified
    first. The breakdown total becomes the quoted amount.
    """
    request = request_from_record(quote)
    score: Optional[ComplexityScore] = None
    if complexity is None:
        estimate = engine.estimate(request, addons)
        breakdown, score = estimate.breakdown, estimate.score
    else:
        breakdown = engine.calculate_price(
            quote.service,
            complexity,
            quote.currency,
            addon_keys_for(request) if addons is None else addons,
        )
    quoted = mark_quoted(quote.status, breakdown.total_price, breakdown.currency, notes)
    quote.quoted_amount = quoted.amount
    quote.quoted_currency = quoted.currency
    quote.complexity = breakdown.complexity.value
    _apply_transition(quote, quoted.transition)
    db.commit()
    db.refresh(quote)
    logger.info(
        "Auto-priced quote %s: %s %s (%s)",
        quote.id,
        breakdown.currency,
        breakdown.total_price,
        breakdown.complexity.value,
    )
    return quote, breakdown, score


def delete_quote(db: Session, quote: models.Quote) -> None:
    db.delete(quote)
    db.commit()
    logger.info("Deleted quote %s", quote.id)


def quote_stats(db: Session, recent: int = 5) -> dict:
    counts = dict(
        db.query(models.Quote.status, func.count(models.Quote.id))
        .group_by(models.Quote.status)
        .all()
    )
    service_rows = (
        db.query(
            models.Quote.service,
            func.count(models.Quote.id),
            func.avg(models.Quote.budget),
        )
        .group_by(models.Quote.service)
        .order_by(func.count(models.Quote.id).desc(), models.Quote.service)
        .all()
    )
    recent_quotes = (
        db.query(models.Quote)
        .order_by(models.Quote.created_at.desc(), models.Quote.id.desc())
        .limit(recent)
        .all()
    )
    return {
        "overview": {
            "total_quotes": sum(counts.values()),
            "pending_quotes": counts.get(QuoteStatus.PENDING, 0),
            "quoted_quotes": counts.get(QuoteStatus.QUOTED, 0),
            "accepted_quotes": counts.get(QuoteStatus.ACCEPTED, 0),
            "completed_quotes": counts.get(QuoteStatus.COMPLETED, 0),
        },
        "service_stats": [
            {
                "service": service,
                "count": count,
                "avg_budget": float(avg) if avg is not None else None,
            }
            for service, count, avg in service_rows
        ],
        "recent_quotes": recent_quotes,
    }


def bulk_update_status(
    db: Session, quote_ids: Iterable[int], status: str, notes: Optional[str] = None
) -> int:
    """Apply one status change to many quotes.

    Every quote goes through :func:`transition_status` before anything is
    written, so an unknown label leaves all of them unchanged.
    """
    quotes = db.query(models.Quote).filter(models.Quote.id.in_(list(quote_ids))).all()
    transitions = [(quote, transition_status(quote.status, status, notes)) for quote in quotes]
    if not transitions:
        # Still reject an unknown label when no id matched
        transition_status(None, status, notes)
    for quote, transition in transitions:
        _apply_transition(quote, transition)
    db.commit()
    logger.info("Bulk status %s applied to %s quotes", status, len(transitions))
    return len(transitions)


def bulk_delete(db: Session, quote_ids: Iterable[int]) -> int:
    deleted = (
        db.query(models.Quote)
        .filter(models.Quote.id.in_(list(quote_ids)))
        .delete(synchronize_session=False)
    )
    db.commit()
    logger.info("Bulk deleted %s quotes", deleted)
    return deleted


def export_quotes(
    db: Session,
    *,
    status: Optional[str] = None,
    service: Optional[str] = None,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> list[models.Quote]:
    """All quotes matching the filters, newest first; date bounds are inclusive."""
    query = db.query(models.Quote)
    if status:
        query = query.filter(models.Quote.status == parse_status(status))
    if service:
        query = query.filter(models.Quote.service == service)
    if start is not None:
        query = query.filter(models.Quote.created_at >= start)
    if end is not None:
        query = query.filter(models.Quote.created_at <= end)
    return query.order_by(models.Quote.created_at.desc(), models.Quote.id.desc()).all()


def dashboard_stats(db: Session, recent: int = 10, months: int = 12) -> dict:
    """Status counts, per-service revenue and the last ``months`` of activity.

    Revenue sums ``quoted_amount`` as stored, without currency conversion.
    """
    counts = dict(
        db.query(models.Quote.status, func.count(models.Quote.id))
        .group_by(models.Quote.status)
        .all()
    )
    revenue = func.coalesce(func.sum(models.Quote.quoted_amount), 0)
    service_rows = (
        db.query(
            models.Quote.service,
            func.count(models.Quote.id),
            func.avg(models.Quote.budget),
            revenue,
        )
        .group_by(models.Quote.service)
        .order_by(func.count(models.Quote.id).desc(), models.Quote.service)
        .all()
    )
    year = extract("year", models.Quote.created_at)
    month = extract("month", models.Quote.created_at)
    monthly_rows = (
        db.query(year, month, func.count(models.Quote.id), revenue)
        .group_by(year, month)
        .order_by(year.desc(), month.desc())
        .limit(months)
        .all()
    )
    recent_quotes = (
        db.query(models.Quote)
        .order_by(models.Quote.created_at.desc(), models.Quote.id.desc())
        .limit(recent)
        .all()
    )
    return {
        "overview": {
            "total_quotes": sum(counts.values()),
            "pending_quotes": counts.get(QuoteStatus.PENDING, 0),
            "quoted_quotes": counts.get(QuoteStatus.QUOTED, 0),
            "accepted_quotes": counts.get(QuoteStatus.ACCEPTED, 0),
            "completed_quotes": counts.get(QuoteStatus.COMPLETED, 0),
            "rejected_quotes": counts.get(QuoteStatus.REJECTED, 0),
        },
        "recent_quotes": recent_quotes,
        "service_stats": [
            {
                "service": service,
                "count": count,
                "avg_budget": float(avg) if avg is not None else None,
                "total_revenue": float(total),
            }
            for service, count, avg, total in service_rows
        ],
        "monthly_stats": [
            {"year": int(y), "month": int(m), "count": count, "revenue": float(total)}
            for y, m, count, total in monthly_rows
        ],
    }
