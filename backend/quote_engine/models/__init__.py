from .quote import Quote, QuotePriority
from ..pricing.lifecycle import QuoteStatus

__all__ = [
    "Quote",
    "QuotePriority",
    "QuoteStatus",
]
