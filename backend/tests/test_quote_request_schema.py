import pytest
from pydantic import TypeAdapter, ValidationError

from quote_engine.pricing import (
    DesignQuoteRequest,
    DevelopmentQuoteRequest,
    GeneralQuoteRequest,
    MarketingQuoteRequest,
    parse_quote_request,
    request_from_record,
)
from quote_engine.schemas import QuoteCreate

create_adapter = TypeAdapter(QuoteCreate)

CONTACT = {
    "name": "Wanjiru Kamau",
    "email": "Wanjiru@Example.com",
    "phone": "+254700000000",
}


@pytest.mark.parametrize(
    "service,cls",
    [
        ("Web Development", DevelopmentQuoteRequest),
        ("Mobile App Design", DevelopmentQuoteRequest),
        ("UI/UX Design", DesignQuoteRequest),
        ("Digital Marketing", MarketingQuoteRequest),
        ("E-commerce Solutions", GeneralQuoteRequest),
        ("Consulting & Automation", GeneralQuoteRequest),
    ],
)
def test_service_name_selects_variant(service, cls):
    request = parse_quote_request({"service": service, "budget": 10, "timeline": "Flexible"})
    assert type(request) is cls


def test_options_from_other_variants_are_rejected():
    with pytest.raises(ValidationError):
        parse_quote_request(
            {
                "service": "Digital Marketing",
                "budget": 10,
                "timeline": "Flexible",
                "features": ["API"],
            }
        )


def test_unknown_option_values_are_rejected():
    with pytest.raises(ValidationError):
        parse_quote_request(
            {"service": "Web Development", "budget": 10, "timeline": "Flexible", "features": ["Blockchain"]}
        )


def test_requests_are_frozen_and_normalized():
    request = parse_quote_request(
        {"service": "Web Development", "currency": " kes ", "budget": 10, "timeline": "Flexible"}
    )
    assert request.currency == "KES"
    assert request.kind == "development"
    with pytest.raises(ValidationError):
        request.budget = 20


def test_negative_budget_is_rejected():
    with pytest.raises(ValidationError):
        parse_quote_request({"service": "Web Development", "budget": -1, "timeline": "Flexible"})


def test_create_requires_development_options():
    payload = {
        **CONTACT,
        "service": "Web Development",
        "budget": 500,
        "timeline": "1-2 months",
        "description": "Online shop for our bakery",
    }
    with pytest.raises(ValidationError):
        create_adapter.validate_python(payload)
    quote = create_adapter.validate_python(
        {**payload, "hosting": "Yes", "domain": "No", "maintenance": "Monthly"}
    )
    assert quote.email == "wanjiru@example.com"
    assert isinstance(quote, DevelopmentQuoteRequest)


def test_create_requires_a_description():
    with pytest.raises(ValidationError):
        create_adapter.validate_python(
            {**CONTACT, "service": "Consulting & Automation", "budget": 5, "timeline": "Flexible", "description": "short"}
        )


def test_create_rejects_bad_phone():
    with pytest.raises(ValidationError):
        create_adapter.validate_python(
            {
                **CONTACT,
                "phone": "0700-CALL-ME",
                "service": "Consulting & Automation",
                "budget": 5,
                "timeline": "Flexible",
                "description": "Automate invoicing for us",
            }
        )


class _Row:
    service = "UI/UX Design"
    currency = "USD"
    budget = 300
    timeline = "3-4 weeks"
    description = None
    design_type = ["Website", "Branding"]
    platforms = ["Desktop"]
    pages = "5-10"
    # Leftovers from other variants are not read
    features = ["API"]
    hosting = "Yes"


def test_request_from_record_reads_matching_fields():
    request = request_from_record(_Row())
    assert isinstance(request, DesignQuoteRequest)
    assert request.design_type == ("Website", "Branding")
    assert request.pages == "5-10"
