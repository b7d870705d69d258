from functools import lru_cache

from ..core.config import settings
from ..database import get_db  # noqa: F401  (re-exported for routers and tests)
from ..pricing import PricingEngine, load_catalog


@lru_cache(maxsize=1)
def get_pricing_engine() -> PricingEngine:
    """Return the process-wide engine built from the configured catalog.

    Tests swap pricing tables via ``app.dependency_overrides``.
    """
    catalog = load_catalog(settings.PRICING_CATALOG_PATH or None)
    return PricingEngine(catalog, default_currency=settings.DEFAULT_CURRENCY)
