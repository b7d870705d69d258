from datetime import datetime
from typing import Optional
import csv
import logging
from io import StringIO

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from .. import schemas
from ..crud import crud_quote
from ..pricing import PricingError
from ..utils import error_response, pricing_error_response
from .dependencies import get_db

router = APIRouter(prefix="/admin", tags=["admin"])
logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("json", "csv")
EXPORT_COLUMNS = [
    "ID",
    "Name",
    "Email",
    "Phone",
    "Company",
    "Service",
    "Timeline",
    "Budget",
    "Currency",
    "Status",
    "Quoted Amount",
    "Created At",
    "Updated At",
]


def _require_ids(body: schemas.BulkQuoteIds) -> None:
    if not body.quote_ids:
        raise error_response(
            "Quote IDs array is required",
            {"quote_ids": "required"},
            status.HTTP_400_BAD_REQUEST,
        )


@router.get("/dashboard", response_model=schemas.AdminDashboard)
def dashboard(db: Session = Depends(get_db)):
    return crud_quote.dashboard_stats(db)


@router.get("/quotes/export", response_model=schemas.QuoteExportResponse)
def export_quotes(
    export_format: str = Query("json", alias="format"),
    status_filter: Optional[str] = Query(None, alias="status"),
    service: Optional[str] = None,
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
):
    """Export matching quotes as JSON or as a CSV attachment."""
    if export_format not in EXPORT_FORMATS:
        raise error_response(
            "Export format must be json or csv",
            {"format": "invalid"},
            status.HTTP_400_BAD_REQUEST,
        )
    try:
        quotes = crud_quote.export_quotes(
            db, status=status_filter, service=service, start=start_date, end=end_date
        )
    except PricingError as exc:
        raise pricing_error_response(exc)
    logger.info("Exporting %s quotes as %s", len(quotes), export_format)

    if export_format == "json":
        return schemas.QuoteExportResponse(
            quotes=[schemas.QuoteRead.model_validate(q) for q in quotes],
            total=len(quotes),
            exported_at=datetime.utcnow(),
        )

    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(EXPORT_COLUMNS)
    for q in quotes:
        writer.writerow([
            str(q.id),
            q.name,
            q.email,
            q.phone,
            q.company or "",
            q.service,
            q.timeline,
            str(q.budget),
            q.currency,
            q.status.value,
            str(q.quoted_amount) if q.quoted_amount is not None else "",
            q.created_at.isoformat() if q.created_at else "",
            q.updated_at.isoformat() if q.updated_at else "",
        ])

    csv_data = output.getvalue()
    return Response(content=csv_data, media_type="text/csv", headers={
        "Content-Disposition": "attachment; filename=quotes-export.csv",
        "Access-Control-Expose-Headers": "Content-Disposition",
    })


@router.delete("/quotes/bulk-delete", response_model=schemas.BulkDeleteResult)
def bulk_delete_quotes(body: schemas.BulkQuoteIds, db: Session = Depends(get_db)):
    _require_ids(body)
    return {"deleted_count": crud_quote.bulk_delete(db, body.quote_ids)}


@router.patch("/quotes/bulk-update-status", response_model=schemas.BulkUpdateResult)
def bulk_update_status(body: schemas.BulkStatusUpdate, db: Session = Depends(get_db)):
    _require_ids(body)
    try:
        modified = crud_quote.bulk_update_status(db, body.quote_ids, body.status, body.notes)
    except PricingError as exc:
        raise pricing_error_response(exc)
    return {"modified_count": modified}
