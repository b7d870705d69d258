from pathlib import Path
from dotenv import load_dotenv
import pytest

# Load environment variables for tests before the app reads its settings
load_dotenv(Path(__file__).resolve().parents[1] / '.env.test')

from quote_engine.pricing import PricingEngine, default_catalog  # noqa: E402


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def engine(catalog):
    """Engine over the bundled catalog, defaulting to KES like production."""
    return PricingEngine(catalog, default_currency="KES")
