from decimal import Decimal

from fastapi.testclient import TestClient

from quote_engine.main import app
from quote_engine.api.dependencies import get_pricing_engine
from quote_engine.pricing import PricingEngine, build_catalog, default_catalog


def override_engine(engine):
    def _override():
        return engine
    return _override


def setup_client(catalog=None, default_currency="KES"):
    engine = PricingEngine(catalog or default_catalog(), default_currency=default_currency)
    app.dependency_overrides[get_pricing_engine] = override_engine(engine)
    return TestClient(app)


def teardown_function():
    app.dependency_overrides.pop(get_pricing_engine, None)


def test_list_services():
    client = setup_client()
    res = client.get("/api/v1/services/")
    assert res.status_code == 200
    data = res.json()
    assert [s["name"] for s in data["services"]][:2] == ["Web Development", "Mobile App Design"]
    assert data["categories"] == ["development", "design", "marketing", "consulting"]
    assert [c["code"] for c in data["currencies"]] == ["USD", "KES"]
    assert {a["key"]: a["default_tier"] for a in data["addons"]}["domain"] == ".com"
    assert res.headers["Cache-Control"] == "public, max-age=3600"


def test_get_service_with_slash_in_name():
    client = setup_client()
    res = client.get("/api/v1/services/UI/UX Design")
    assert res.status_code == 200
    data = res.json()
    assert data["category"] == "design"
    assert Decimal(data["complexity"]["advanced"]["multiplier"]) == Decimal("2.5")


def test_get_unknown_service_returns_404():
    client = setup_client()
    res = client.get("/api/v1/services/Landscaping")
    assert res.status_code == 404
    assert res.json()["detail"]["field_errors"] == {"service": "not_found"}


def test_services_by_category():
    client = setup_client()
    res = client.get("/api/v1/services/category/marketing")
    assert res.status_code == 200
    assert [s["name"] for s in res.json()] == ["Digital Marketing"]

    res = client.get("/api/v1/services/category/gardening")
    assert res.status_code == 400
    assert res.json()["detail"]["field_errors"] == {"category": "invalid"}


def test_meta_endpoints():
    client = setup_client()
    assert "6+ months" in client.get("/api/v1/services/meta/timelines").json()
    assert client.get("/api/v1/services/meta/currencies").json()[1]["symbol"] == "KSh"
    addons = client.get("/api/v1/services/meta/addons").json()
    assert [a["key"] for a in addons] == ["hosting", "domain", "maintenance", "ssl"]
    rules = client.get("/api/v1/services/meta/pricing-rules").json()
    assert Decimal(rules["minimums"]["KES"]) == Decimal("5000")


def test_calculate_price():
    client = setup_client()
    res = client.post(
        "/api/v1/services/calculate-price",
        params={
            "service": "Web Development",
            "complexity": "intermediate",
            "currency": "KES",
            "addons": "hosting,domain,unknown",
        },
    )
    assert res.status_code == 200
    data = res.json()
    assert Decimal(data["service_price"]) == Decimal("54000")
    assert Decimal(data["total_price"]) == Decimal("57250")
    assert [a["key"] for a in data["addons"]] == ["hosting", "domain"]


def test_calculate_price_defaults():
    client = setup_client()
    res = client.post("/api/v1/services/calculate-price", params={"service": "Consulting & Automation"})
    assert res.status_code == 200
    data = res.json()
    assert data["currency"] == "KES"
    assert data["complexity"] == "basic"
    assert Decimal(data["total_price"]) == Decimal("15000")


def test_calculate_price_errors():
    client = setup_client()
    res = client.post(
        "/api/v1/services/calculate-price",
        params={"service": "Web Development", "complexity": "expert"},
    )
    assert res.status_code == 400
    assert res.json()["detail"]["field_errors"] == {"complexity": "invalid"}

    res = client.post(
        "/api/v1/services/calculate-price",
        params={"service": "Web Development", "currency": "EUR"},
    )
    assert res.status_code == 400
    assert res.json()["detail"]["field_errors"] == {"currency": "unsupported"}

    res = client.post("/api/v1/services/calculate-price", params={"service": "Landscaping"})
    assert res.status_code == 400
    assert res.json()["detail"]["field_errors"] == {"service": "not_found"}


def test_alternate_catalog_is_injected():
    catalog = build_catalog(
        {
            "services": [
                {
                    "name": "Audit",
                    "category": "consulting",
                    "base_price": {"USD": 100},
                    "complexity": {
                        "basic": {"multiplier": 1},
                        "intermediate": {"multiplier": 2},
                        "advanced": {"multiplier": 3},
                    },
                }
            ],
            "currencies": {"USD": {"symbol": "$"}},
        }
    )
    client = setup_client(catalog, default_currency="USD")
    res = client.post(
        "/api/v1/services/calculate-price",
        params={"service": "Audit", "complexity": "advanced"},
    )
    assert res.status_code == 200
    assert Decimal(res.json()["total_price"]) == Decimal("300")
    assert [s["name"] for s in client.get("/api/v1/services/").json()["services"]] == ["Audit"]
