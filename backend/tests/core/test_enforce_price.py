"""Price Enforcement — tests for the pure price rule.

Tests cover:
    - Positive prices pass
    - Zero and negative prices raise ValidationError on the price field
    - Supplied ErrorContext is carried on the error
"""

import pytest

from property_api.core.enforce_price import validate_price, MIN_PRICE
from property_api.core.errors import ErrorContext, ValidationError


def test_validate_price_accepts_positive_price():
    assert validate_price(1) is None
    assert validate_price(2_500_000) is None


@pytest.mark.parametrize("price", [MIN_PRICE, -1, -1_000_000])
def test_validate_price_rejects_non_positive_price(price):
    with pytest.raises(ValidationError) as exc_info:
        validate_price(price)
    assert exc_info.value.field == "price"
    assert exc_info.value.http_status == 400
    assert "greater than zero" in exc_info.value.message


def test_validate_price_attaches_context():
    ctx = ErrorContext(request_id="req-1", operation="create")
    with pytest.raises(ValidationError) as exc_info:
        validate_price(0, ctx)
    assert exc_info.value.context is ctx
