from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from stockwatch.core.exceptions import (
    ConflictException,
    EntityNotFoundException,
    ServerException,
    ValidationException,
)
from stockwatch.models.inventory import Inventory
from stockwatch.models.product import Product
from stockwatch.schemas.product import ProductCreate
from stockwatch.services.catalog_service import CatalogService


def _payload(warehouse_id: int, **overrides) -> dict:
    body = {
        "name": "Widget",
        "sku": "WID-001",
        "price": 12.5,
        "warehouse_id": warehouse_id,
        "initial_quantity": 40,
    }
    body.update(overrides)
    return body


def _row_counts(db) -> tuple:
    return db.query(Product).count(), db.query(Inventory).count()


def test_creates_product_and_inventory_together(db, warehouse):
    service = CatalogService(db)

    product = service.create_product_with_inventory(_payload(warehouse.id))

    stored = db.query(Product).filter(Product.sku == "WID-001").one()
    assert stored.id == product.id
    assert stored.price == Decimal("12.50")
    assert stored.is_bundle is False
    assert stored.threshold is None

    inventory = db.query(Inventory).filter(Inventory.product_id == product.id).one()
    assert inventory.warehouse_id == warehouse.id
    assert inventory.quantity == 40


def test_accepts_validated_schema_instance(db, warehouse):
    service = CatalogService(db)
    payload = ProductCreate.model_validate(_payload(warehouse.id, sku="WID-SCHEMA"))

    product = service.create_product_with_inventory(payload)

    assert product.sku == "WID-SCHEMA"


def test_zero_initial_quantity_is_a_valid_stock_level(db, warehouse):
    service = CatalogService(db)

    product = service.create_product_with_inventory(_payload(warehouse.id, initial_quantity=0))

    inventory = db.query(Inventory).filter(Inventory.product_id == product.id).one()
    assert inventory.quantity == 0


@pytest.mark.parametrize("missing", ["name", "sku", "price", "warehouse_id", "initial_quantity"])
def test_missing_field_is_rejected_without_writes(db, warehouse, missing):
    service = CatalogService(db)
    body = _payload(warehouse.id)
    del body[missing]

    with pytest.raises(ValidationException) as exc_info:
        service.create_product_with_inventory(body)

    assert exc_info.value.fields == [missing]
    assert _row_counts(db) == (0, 0)


def test_non_numeric_price_is_rejected(db, warehouse):
    service = CatalogService(db)

    with pytest.raises(ValidationException) as exc_info:
        service.create_product_with_inventory(_payload(warehouse.id, price="twelve"))

    assert exc_info.value.fields == ["price"]
    assert _row_counts(db) == (0, 0)


def test_every_invalid_field_is_reported(db, warehouse):
    service = CatalogService(db)

    with pytest.raises(ValidationException) as exc_info:
        service.create_product_with_inventory(
            _payload(warehouse.id, name="  ", price=-1, initial_quantity=-5)
        )

    assert exc_info.value.fields == ["initial_quantity", "name", "price"]


def test_duplicate_sku_raises_conflict(db, seed, warehouse):
    existing = seed.product("WID-001")
    service = CatalogService(db)

    with pytest.raises(ConflictException):
        service.create_product_with_inventory(_payload(warehouse.id))

    assert db.query(Product).filter(Product.sku == "WID-001").count() == 1
    assert db.query(Inventory).count() == 0
    assert db.query(Product).one().id == existing.id


def test_sku_match_is_case_sensitive(db, warehouse):
    service = CatalogService(db)

    service.create_product_with_inventory(_payload(warehouse.id, sku="wid-001"))
    service.create_product_with_inventory(_payload(warehouse.id, sku="WID-001"))

    assert db.query(Product).count() == 2


def test_unknown_warehouse_raises_not_found(db, warehouse):
    service = CatalogService(db)

    with pytest.raises(EntityNotFoundException) as exc_info:
        service.create_product_with_inventory(_payload(warehouse.id + 999))

    assert exc_info.value.entity == "Warehouse"
    assert _row_counts(db) == (0, 0)


def test_constraint_violation_after_precheck_maps_to_conflict(db, seed, warehouse, monkeypatch):
    # Another writer commits the same SKU between the pre-check and the insert.
    seed.product("WID-001")
    service = CatalogService(db)
    real_lookup = service._product_repo.get_by_sku
    calls = []

    def stale_lookup(sku):
        calls.append(sku)
        return None if len(calls) == 1 else real_lookup(sku)

    monkeypatch.setattr(service._product_repo, "get_by_sku", stale_lookup)

    with pytest.raises(ConflictException):
        service.create_product_with_inventory(_payload(warehouse.id))

    assert db.query(Product).filter(Product.sku == "WID-001").count() == 1
    assert db.query(Inventory).count() == 0


def test_failed_inventory_insert_rolls_back_product(db, warehouse, monkeypatch):
    service = CatalogService(db)

    def broken_add(entity):
        raise OperationalError("INSERT INTO inventory", {}, Exception("database is locked"))

    monkeypatch.setattr(service._inventory_repo, "add", broken_add)

    with pytest.raises(ServerException):
        service.create_product_with_inventory(_payload(warehouse.id))

    assert _row_counts(db) == (0, 0)


def test_storage_failure_during_precheck_is_server_error(db, warehouse, monkeypatch):
    service = CatalogService(db)

    def timed_out(sku):
        raise OperationalError("SELECT", {}, Exception("statement timeout"))

    monkeypatch.setattr(service._product_repo, "get_by_sku", timed_out)

    with pytest.raises(ServerException):
        service.create_product_with_inventory(_payload(warehouse.id))
