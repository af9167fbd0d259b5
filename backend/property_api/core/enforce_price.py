"""Price Enforcement — the single business rule applied before any write.

Invariants:
    - validate_price is PURE: raises ValidationError or returns None, no IO
    - MIN_PRICE is the single source of truth for the lower bound (exclusive)
"""

from property_api.core.errors import ErrorContext, ValidationError


MIN_PRICE: int = 0


def validate_price(price: int, context: ErrorContext | None = None) -> None:
    """Reject listings whose price is not strictly positive."""
    if price <= MIN_PRICE:
        raise ValidationError(
            "Price must be greater than zero", "price", context,
        )
