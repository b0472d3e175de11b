from decimal import Decimal

import pytest
from pydantic import ValidationError

from stockwatch.schemas.product import ProductCreate


def _body(**overrides) -> dict:
    body = {
        "name": "Widget",
        "sku": "WID-001",
        "price": 12.5,
        "warehouse_id": 1,
        "initial_quantity": 10,
    }
    body.update(overrides)
    return body


def _invalid_fields(body: dict) -> set:
    with pytest.raises(ValidationError) as exc_info:
        ProductCreate.model_validate(body)
    return {err["loc"][0] for err in exc_info.value.errors()}


def test_strips_whitespace_but_keeps_case():
    payload = ProductCreate.model_validate(_body(name="  Widget  ", sku=" wid-001 "))

    assert payload.name == "Widget"
    assert payload.sku == "wid-001"


def test_integer_and_decimal_prices_are_accepted():
    assert ProductCreate.model_validate(_body(price=0)).price == Decimal("0")
    assert ProductCreate.model_validate(_body(price=Decimal("19.99"))).price == Decimal("19.99")


@pytest.mark.parametrize("price", ["12.50", "free", True, None, float("nan"), float("inf"), -0.01, 1.234])
def test_price_must_be_a_finite_non_negative_number(price):
    assert _invalid_fields(_body(price=price)) == {"price"}


@pytest.mark.parametrize("quantity", [-1, 2.5, "10", True, None])
def test_initial_quantity_must_be_a_non_negative_integer(quantity):
    assert _invalid_fields(_body(initial_quantity=quantity)) == {"initial_quantity"}


@pytest.mark.parametrize("field", ["name", "sku"])
def test_blank_strings_are_rejected(field):
    assert _invalid_fields(_body(**{field: "   "})) == {field}


def test_warehouse_id_must_be_an_integer():
    assert _invalid_fields(_body(warehouse_id="north")) == {"warehouse_id"}


@pytest.mark.parametrize("field", ["warehouse_id", "initial_quantity"])
@pytest.mark.parametrize("value", [2**31, 10**20])
def test_integers_beyond_column_range_are_rejected(field, value):
    assert _invalid_fields(_body(**{field: value})) == {field}


@pytest.mark.parametrize("field", ["warehouse_id", "initial_quantity"])
def test_largest_storable_integer_is_accepted(field):
    payload = ProductCreate.model_validate(_body(**{field: 2**31 - 1}))

    assert getattr(payload, field) == 2**31 - 1
