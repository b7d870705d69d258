from typing import List, Optional
import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from .. import models, schemas
from ..core.config import settings
from ..crud import crud_quote
from ..pricing import PricingEngine, PricingError, ServiceNotFound
from ..schemas.service import ComplexityScoreResponse, EstimateResponse, PriceBreakdownResponse
from ..utils import error_response, pricing_error_response
from .dependencies import get_db, get_pricing_engine

router = APIRouter(tags=["quotes"])
logger = logging.getLogger(__name__)

VALID_SORT_ORDERS = ("asc", "desc")


def _get_quote_or_404(db: Session, quote_id: int) -> models.Quote:
    quote = crud_quote.get_quote(db, quote_id)
    if quote is None:
        raise error_response(
            "Quote not found",
            {"quote_id": "not_found"},
            status.HTTP_404_NOT_FOUND,
        )
    return quote


@router.post("/", response_model=schemas.QuoteRead, status_code=status.HTTP_201_CREATED)
def create_quote(
    quote_in: schemas.QuoteCreate,
    db: Session = Depends(get_db),
    engine: PricingEngine = Depends(get_pricing_engine),
):
    try:
        return crud_quote.create_quote(db, quote_in, engine)
    except PricingError as exc:
        raise pricing_error_response(exc)


@router.post("/estimate", response_model=EstimateResponse)
def estimate_quote(
    request: schemas.QuoteRequest,
    addons: Optional[List[str]] = Query(None),
    engine: PricingEngine = Depends(get_pricing_engine),
):
    """Classify and price a request without storing it.

    ``addons`` overrides the addons implied by the request's hosting,
    domain and maintenance answers.
    """
    try:
        estimate = engine.estimate(request, addons)
    except ServiceNotFound as exc:
        raise pricing_error_response(exc, status.HTTP_404_NOT_FOUND)
    except PricingError as exc:
        raise pricing_error_response(exc)
    return EstimateResponse(
        complexity=estimate.complexity,
        recommended_amount=estimate.recommended_amount,
        score=ComplexityScoreResponse.from_score(estimate.score),
        breakdown=PriceBreakdownResponse.from_breakdown(estimate.breakdown),
    )


@router.get("/", response_model=schemas.QuoteListResponse)
def list_quotes(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    status_filter: Optional[str] = Query(None, alias="status"),
    service: Optional[str] = None,
    sort_by: str = "created_at",
    sort_order: str = "desc",
    db: Session = Depends(get_db),
):
    if sort_order not in VALID_SORT_ORDERS:
        raise error_response(
            "Sort order must be asc or desc",
            {"sort_order": "invalid"},
            status.HTTP_400_BAD_REQUEST,
        )
    limit = min(limit or settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
    try:
        quotes, total = crud_quote.list_quotes(
            db,
            page=page,
            limit=limit,
            status=status_filter,
            service=service,
            sort_by=sort_by,
            sort_order=sort_order,
        )
    except PricingError as exc:
        raise pricing_error_response(exc)
    return {"quotes": quotes, "pagination": crud_quote.pagination(page, limit, total)}


@router.get("/stats", response_model=schemas.QuoteStats)
def quote_stats(db: Session = Depends(get_db)):
    return crud_quote.quote_stats(db)


@router.get("/service/{service:path}", response_model=schemas.QuoteListResponse)
def quotes_by_service(
    service: str,
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
    engine: PricingEngine = Depends(get_pricing_engine),
):
    if engine.catalog.find_service(service) is None:
        raise error_response(
            "Invalid service type",
            {"service": "invalid"},
            status.HTTP_400_BAD_REQUEST,
        )
    limit = min(limit or settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
    quotes, total = crud_quote.get_quotes_by_service(db, service, page=page, limit=limit)
    return {"quotes": quotes, "pagination": crud_quote.pagination(page, limit, total)}


@router.get("/{quote_id}", response_model=schemas.QuoteRead)
def get_quote(quote_id: int, db: Session = Depends(get_db)):
    return _get_quote_or_404(db, quote_id)


@router.patch("/{quote_id}/status", response_model=schemas.QuoteRead)
@router.put("/{quote_id}/status", response_model=schemas.QuoteRead)
def update_quote_status(
    quote_id: int,
    body: schemas.QuoteStatusUpdate,
    db: Session = Depends(get_db),
):
    quote = _get_quote_or_404(db, quote_id)
    try:
        return crud_quote.update_status(
            db,
            quote,
            body.status,
            body.notes,
            priority=body.priority,
            assigned_to=body.assigned_to,
        )
    except PricingError as exc:
        raise pricing_error_response(exc)


@router.patch("/{quote_id}/quote", response_model=schemas.QuoteRead)
@router.put("/{quote_id}/quote", response_model=schemas.QuoteRead)
def add_quote_amount(
    quote_id: int,
    body: schemas.QuoteAmountIn,
    db: Session = Depends(get_db),
    engine: PricingEngine = Depends(get_pricing_engine),
):
    quote = _get_quote_or_404(db, quote_id)
    try:
        return crud_quote.add_quote_amount(
            db, quote, body.amount, body.currency, engine, body.notes
        )
    except PricingError as exc:
        raise pricing_error_response(exc)


@router.post("/{quote_id}/price", response_model=schemas.QuotePriceResponse)
def price_quote(
    quote_id: int,
    body: Optional[schemas.QuotePriceIn] = None,
    db: Session = Depends(get_db),
    engine: PricingEngine = Depends(get_pricing_engine),
):
    """Price a stored quote with the engine and mark it quoted."""
    body = body or schemas.QuotePriceIn()
    quote = _get_quote_or_404(db, quote_id)
    try:
        quote, breakdown, score = crud_quote.price_quote(
            db,
            quote,
            engine,
            complexity=body.complexity,
            addons=body.addons,
            notes=body.notes,
        )
    except PricingError as exc:
        raise pricing_error_response(exc)
    return schemas.QuotePriceResponse(
        quote=schemas.QuoteRead.model_validate(quote),
        breakdown=PriceBreakdownResponse.from_breakdown(breakdown),
        score=ComplexityScoreResponse.from_score(score) if score is not None else None,
    )


@router.delete("/{quote_id}", response_model=schemas.QuoteRead)
def delete_quote(quote_id: int, db: Session = Depends(get_db)):
    quote = _get_quote_or_404(db, quote_id)
    payload = schemas.QuoteRead.model_validate(quote)
    crud_quote.delete_quote(db, quote)
    return payload
