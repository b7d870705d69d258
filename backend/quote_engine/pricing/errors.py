"""Error taxonomy raised by the pricing engine.

Every error carries the request ``field`` it relates to and a short ``code``
so the API layer can build ``{"message", "field_errors"}`` payloads without
string matching.
"""


class PricingError(Exception):
    field = "pricing"
    code = "invalid"

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.message = message
        self.value = value

    @property
    def field_errors(self) -> dict[str, str]:
        return {self.field: self.code}


class CatalogError(PricingError, ValueError):
    """Catalog data is structurally invalid."""

    field = "catalog"


class ServiceNotFound(PricingError, LookupError):
    field = "service"
    code = "not_found"


class AddonNotFound(PricingError, LookupError):
    field = "addons"
    code = "not_found"


class UnsupportedCurrency(PricingError):
    field = "currency"
    code = "unsupported"


class InvalidComplexity(PricingError):
    field = "complexity"


class InvalidStatus(PricingError):
    field = "status"


class InvalidQuoteAmount(PricingError):
    field = "amount"
