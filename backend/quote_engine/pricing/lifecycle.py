"""Quote status transitions.

Operators may move a quote between any two known statuses; only the target
label is validated. Accepting a computed price always lands on ``quoted``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .errors import InvalidQuoteAmount, InvalidStatus


class QuoteStatus(str, enum.Enum):
    PENDING = "pending"
    REVIEWED = "reviewed"
    QUOTED = "quoted"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    COMPLETED = "completed"


TERMINAL_STATUSES = frozenset({QuoteStatus.REJECTED, QuoteStatus.COMPLETED})


@dataclass(frozen=True)
class StatusTransition:
    previous: Optional[QuoteStatus]
    status: QuoteStatus
    note: Optional[str] = None


@dataclass(frozen=True)
class QuotedAmount:
    transition: StatusTransition
    amount: Decimal
    currency: str


def parse_status(value: Any) -> QuoteStatus:
    if isinstance(value, QuoteStatus):
        return value
    try:
        return QuoteStatus(str(value).strip().lower())
    except ValueError:
        raise InvalidStatus("Invalid status value", value) from None


def is_terminal(status: Any) -> bool:
    return parse_status(status) in TERMINAL_STATUSES


def _clean_note(note: Optional[str]) -> Optional[str]:
    if note is None:
        return None
    note = note.strip()
    return note or None


def transition_status(current: Any, target: Any, note: Optional[str] = None) -> StatusTransition:
    """Validate a status change and return the resulting status and note.

    ``current`` is informational: an unknown stored label does not block
    moving to a valid target.
    """
    new_status = parse_status(target)
    try:
        previous = parse_status(current) if current is not None else None
    except InvalidStatus:
        previous = None
    return StatusTransition(previous=previous, status=new_status, note=_clean_note(note))


def mark_quoted(current: Any, amount: Any, currency: str, note: Optional[str] = None) -> QuotedAmount:
    """Accept ``amount`` into a quote, forcing the status to ``quoted``."""
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidQuoteAmount("Valid quote amount is required", amount) from None
    if not value.is_finite() or value <= 0:
        raise InvalidQuoteAmount("Valid quote amount is required", amount)
    return QuotedAmount(
        transition=transition_status(current, QuoteStatus.QUOTED, note),
        amount=value,
        currency=str(currency).strip().upper(),
    )
