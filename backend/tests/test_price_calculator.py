from decimal import Decimal

import pytest

from quote_engine.pricing import (
    ComplexityTier,
    InvalidComplexity,
    PricingEngine,
    ServiceNotFound,
    UnsupportedCurrency,
    build_catalog,
    calculate_price,
)


def test_documented_kes_example(catalog):
    breakdown = calculate_price(
        catalog, "Web Development", "intermediate", "KES", ["hosting", "domain"]
    )
    assert breakdown.base_price == Decimal("30000")
    assert breakdown.multiplier == Decimal("1.8")
    assert breakdown.service_price == Decimal("54000")
    assert [(a.key, a.tier, a.price) for a in breakdown.addons] == [
        ("hosting", "basic", Decimal("1300")),
        ("domain", ".com", Decimal("1950")),
    ]
    assert breakdown.addon_price == Decimal("3250")
    assert breakdown.total_price == Decimal("57250")
    assert breakdown.complexity is ComplexityTier.INTERMEDIATE
    assert breakdown.price_range.min == Decimal("20000")


def test_defaults_to_basic_without_addons(catalog):
    breakdown = calculate_price(catalog, "Mobile App Design", currency="usd")
    assert breakdown.currency == "USD"
    assert breakdown.complexity is ComplexityTier.BASIC
    assert breakdown.addons == ()
    assert breakdown.total_price == Decimal("385")


def test_calculation_is_deterministic(catalog):
    args = (catalog, "E-commerce Solutions", "advanced", "KES", ["ssl", "maintenance"])
    assert calculate_price(*args) == calculate_price(*args)


def test_unknown_addons_are_ignored(catalog):
    known = calculate_price(catalog, "Web Development", "basic", "USD", ["hosting"])
    mixed = calculate_price(
        catalog, "Web Development", "basic", "USD", ["hosting", "jetpack", "hosting"]
    )
    assert mixed.total_price == known.total_price == Decimal("240")
    assert [a.key for a in mixed.addons] == ["hosting"]


def test_unknown_service(catalog):
    with pytest.raises(ServiceNotFound) as exc:
        calculate_price(catalog, "Landscaping")
    assert exc.value.field_errors == {"service": "not_found"}


def test_unsupported_currency(catalog):
    with pytest.raises(UnsupportedCurrency):
        calculate_price(catalog, "Web Development", "basic", "EUR")


def test_unknown_tier_is_rejected(catalog):
    with pytest.raises(InvalidComplexity):
        calculate_price(catalog, "Web Development", "expert", "USD")


def test_rounds_half_up_to_whole_units():
    catalog = build_catalog(
        {
            "services": [
                {
                    "name": "Tiny",
                    "category": "misc",
                    "base_price": {"USD": 5},
                    "complexity": {
                        "basic": {"multiplier": "1.3"},
                        "intermediate": {"multiplier": "1.5"},
                        "advanced": {"multiplier": "2.1"},
                    },
                }
            ],
            "addons": {},
            "currencies": {"USD": {"symbol": "$"}},
        }
    )
    # 6.5 rounds up, not to even
    assert calculate_price(catalog, "Tiny", "basic", "USD").service_price == Decimal("7")
    assert calculate_price(catalog, "Tiny", "intermediate", "USD").service_price == Decimal("8")
    assert calculate_price(catalog, "Tiny", "advanced", "USD").service_price == Decimal("11")
    assert calculate_price(catalog, "Tiny", "basic", "USD").price_range is None


def test_addon_missing_currency_is_unsupported():
    catalog = build_catalog(
        {
            "services": [
                {
                    "name": "Tiny",
                    "base_price": {"USD": 10, "KES": 1000},
                    "complexity": {
                        "basic": {"multiplier": 1},
                        "intermediate": {"multiplier": 2},
                        "advanced": {"multiplier": 3},
                    },
                }
            ],
            "addons": {"support": {"prices": {"basic": {"USD": 5}}}},
            "currencies": {"USD": {}, "KES": {}},
        }
    )
    with pytest.raises(UnsupportedCurrency):
        calculate_price(catalog, "Tiny", "basic", "KES", ["support"])


def test_engine_uses_default_currency(engine):
    breakdown = engine.calculate_price("Web Development")
    assert breakdown.currency == "KES"
    assert breakdown.total_price == Decimal("30000")


def test_engine_rejects_default_currency_outside_catalog(catalog):
    with pytest.raises(UnsupportedCurrency):
        PricingEngine(catalog, default_currency="EUR")


def test_engine_estimate_uses_request_addons(engine):
    from quote_engine.pricing import parse_quote_request

    request = parse_quote_request(
        {
            "service": "Web Development",
            "currency": "KES",
            "budget": 50000,
            "timeline": "1-2 months",
            "features": ["Frontend", "Backend"],
            "hosting": "Yes",
            "domain": "Yes",
            "maintenance": "None",
        }
    )
    estimate = engine.estimate(request)
    assert estimate.complexity is ComplexityTier.INTERMEDIATE
    assert estimate.recommended_amount == Decimal("57250")
    assert engine.estimate(request, addons=[]).recommended_amount == Decimal("54000")


def test_service_is_resolved_before_the_tier(catalog):
    with pytest.raises(ServiceNotFound):
        calculate_price(catalog, "Landscaping", "expert", "USD")


def test_currency_is_resolved_before_the_tier(catalog):
    with pytest.raises(UnsupportedCurrency):
        calculate_price(catalog, "Web Development", "expert", "EUR")
