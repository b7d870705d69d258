import logging
from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import TypeAdapter
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from quote_engine.crud import crud_quote
from quote_engine.models import QuotePriority, QuoteStatus
from quote_engine.models.base import BaseModel
from quote_engine.pricing import InvalidStatus
from quote_engine.schemas import QuoteCreate

create_adapter = TypeAdapter(QuoteCreate)


def setup_db():
    engine = create_engine(
        "sqlite:///:memory:", connect_args={"check_same_thread": False}
    )
    BaseModel.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)
    return Session()


def design_quote(**overrides):
    data = {
        "name": "Njeri Wambui",
        "email": "njeri@example.com",
        "phone": "+254733000333",
        "service": "UI/UX Design",
        "currency": "USD",
        "budget": "500",
        "timeline": "3-4 weeks",
        "description": "Redesign of our booking dashboard",
        "design_type": ["Dashboard", "Website", "Branding"],
        "platforms": ["Desktop", "Mobile"],
        "pages": "10-20",
    }
    data.update(overrides)
    return create_adapter.validate_python(data)


def test_create_quote_stores_lists_and_complexity(engine, caplog):
    caplog.set_level(logging.INFO, logger="quote_engine.crud.crud_quote")
    db = setup_db()
    quote = crud_quote.create_quote(db, design_quote(), engine)
    # 500 / 154 >= 3 (+2) and three design types (+2)
    assert quote.complexity == "advanced"
    assert quote.design_type == ["Dashboard", "Website", "Branding"]
    assert quote.status is QuoteStatus.PENDING
    assert any("Created quote" in r.getMessage() for r in caplog.records)


def test_update_status_rejects_unknown_label(engine):
    db = setup_db()
    quote = crud_quote.create_quote(db, design_quote(), engine)
    crud_quote.update_status(db, quote, "reviewed", "Looks good")
    with pytest.raises(InvalidStatus):
        crud_quote.update_status(db, quote, "archived", "ignored")
    db.refresh(quote)
    assert quote.status is QuoteStatus.REVIEWED
    assert quote.notes == "Looks good"


def test_status_without_note_keeps_previous_note(engine):
    db = setup_db()
    quote = crud_quote.create_quote(db, design_quote(), engine)
    crud_quote.update_status(db, quote, "reviewed", "First pass")
    crud_quote.update_status(db, quote, "accepted")
    assert quote.status is QuoteStatus.ACCEPTED
    assert quote.notes == "First pass"


def test_price_quote_overwrites_status(engine):
    db = setup_db()
    quote = crud_quote.create_quote(db, design_quote(), engine)
    crud_quote.update_status(db, quote, "rejected")
    quote, breakdown, score = crud_quote.price_quote(db, quote, engine)
    assert score.tier.value == "advanced"
    # 154 * 2.5 = 385
    assert breakdown.total_price == Decimal("385")
    assert quote.status is QuoteStatus.QUOTED
    assert quote.quoted_amount == Decimal("385")
    assert quote.notes == "auto-priced"


def test_quotes_by_service_and_pagination(engine):
    db = setup_db()
    for budget in ("100", "200", "300"):
        crud_quote.create_quote(db, design_quote(budget=budget), engine)
    quotes, total = crud_quote.get_quotes_by_service(db, "UI/UX Design", page=2, limit=2)
    assert total == 3
    assert len(quotes) == 1
    assert crud_quote.pagination(2, 2, total) == {
        "current_page": 2,
        "total_pages": 2,
        "total_quotes": 3,
        "has_next_page": False,
        "has_prev_page": True,
    }
    assert crud_quote.get_quotes_by_service(db, "Digital Marketing") == ([], 0)


def test_update_status_blank_assignee_clears_it(engine):
    db = setup_db()
    quote = crud_quote.create_quote(db, design_quote(), engine)
    crud_quote.update_status(db, quote, "reviewed", priority=QuotePriority.URGENT, assigned_to="Wanjiru")
    assert quote.priority is QuotePriority.URGENT
    assert quote.assigned_to == "Wanjiru"
    crud_quote.update_status(db, quote, "accepted", assigned_to="  ")
    assert quote.priority is QuotePriority.URGENT
    assert quote.assigned_to is None


def test_bulk_update_status_checks_label_before_writing(engine):
    db = setup_db()
    quotes = [crud_quote.create_quote(db, design_quote(), engine) for _ in range(3)]
    crud_quote.update_status(db, quotes[0], "reviewed", "Keep me")
    ids = [q.id for q in quotes]

    with pytest.raises(InvalidStatus):
        crud_quote.bulk_update_status(db, ids, "archived", "never written")
    db.expire_all()
    assert [q.status for q in quotes] == [QuoteStatus.REVIEWED, QuoteStatus.PENDING, QuoteStatus.PENDING]

    assert crud_quote.bulk_update_status(db, ids[:2] + [999], "rejected") == 2
    db.expire_all()
    assert [q.status for q in quotes] == [QuoteStatus.REJECTED, QuoteStatus.REJECTED, QuoteStatus.PENDING]
    assert quotes[0].notes == "Keep me"

    with pytest.raises(InvalidStatus):
        crud_quote.bulk_update_status(db, [999], "archived")


def test_bulk_delete_counts_matching_rows(engine):
    db = setup_db()
    ids = [crud_quote.create_quote(db, design_quote(), engine).id for _ in range(3)]
    assert crud_quote.bulk_delete(db, [ids[0], ids[2], 999]) == 2
    assert [q.id for q in crud_quote.export_quotes(db)] == [ids[1]]


def test_export_filters_by_status_service_and_dates(engine):
    db = setup_db()
    old, new = (crud_quote.create_quote(db, design_quote(), engine) for _ in range(2))
    old.created_at = datetime(2024, 1, 15, 9, 0)
    new.created_at = datetime(2024, 3, 2, 9, 0)
    db.commit()
    crud_quote.update_status(db, new, "reviewed")

    assert [q.id for q in crud_quote.export_quotes(db)] == [new.id, old.id]
    assert [q.id for q in crud_quote.export_quotes(db, status="reviewed")] == [new.id]
    assert crud_quote.export_quotes(db, service="Web Development") == []
    assert [q.id for q in crud_quote.export_quotes(db, start=datetime(2024, 2, 1))] == [new.id]
    assert [q.id for q in crud_quote.export_quotes(db, end=datetime(2024, 1, 15, 9, 0))] == [old.id]
    with pytest.raises(InvalidStatus):
        crud_quote.export_quotes(db, status="archived")


def test_dashboard_stats_revenue_and_months(engine):
    db = setup_db()
    quotes = [crud_quote.create_quote(db, design_quote(), engine) for _ in range(3)]
    quotes[0].created_at = datetime(2024, 1, 10)
    quotes[1].created_at = datetime(2024, 1, 20)
    quotes[2].created_at = datetime(2024, 2, 5)
    db.commit()
    crud_quote.add_quote_amount(db, quotes[0], Decimal("400"), "USD", engine)
    crud_quote.add_quote_amount(db, quotes[2], Decimal("250"), "USD", engine)
    crud_quote.update_status(db, quotes[1], "rejected")

    stats = crud_quote.dashboard_stats(db)
    assert stats["overview"]["total_quotes"] == 3
    assert stats["overview"]["quoted_quotes"] == 2
    assert stats["overview"]["rejected_quotes"] == 1
    assert stats["service_stats"] == [
        {"service": "UI/UX Design", "count": 3, "avg_budget": 500.0, "total_revenue": 650.0}
    ]
    assert stats["monthly_stats"] == [
        {"year": 2024, "month": 2, "count": 1, "revenue": 250.0},
        {"year": 2024, "month": 1, "count": 2, "revenue": 400.0},
    ]
    assert [q.id for q in stats["recent_quotes"]] == [quotes[2].id, quotes[1].id, quotes[0].id]
