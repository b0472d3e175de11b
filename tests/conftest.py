from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from stockwatch.database import Base, get_db
from stockwatch.main import app
from stockwatch.models import (
    Company,
    Warehouse,
    Product,
    Inventory,
    Sale,
    Supplier,
    ProductSupplier,
)


NOW = datetime(2026, 10, 1, 12, 0, 0)


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


class Seeder:
    """Inserts rows directly, bypassing the services under test."""

    def __init__(self, db):
        self.db = db

    def _save(self, row):
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row

    def company(self, name: str = "Acme") -> Company:
        return self._save(Company(name=name))

    def warehouse(self, company: Company, name: str = "Main", location: Optional[str] = None) -> Warehouse:
        return self._save(Warehouse(company_id=company.id, name=name, location=location))

    def product(
        self,
        sku: str,
        name: Optional[str] = None,
        threshold: Optional[int] = None,
        price: str = "9.99",
        is_bundle: bool = False,
    ) -> Product:
        return self._save(
            Product(
                name=name or f"Product {sku}",
                sku=sku,
                price=Decimal(price),
                threshold=threshold,
                is_bundle=is_bundle,
            )
        )

    def stock(self, product: Product, warehouse: Warehouse, quantity: int) -> Inventory:
        return self._save(Inventory(product_id=product.id, warehouse_id=warehouse.id, quantity=quantity))

    def sale(self, product: Product, quantity: int, days_ago: float = 1, now: datetime = NOW) -> Sale:
        return self._save(
            Sale(product_id=product.id, quantity=quantity, sale_date=now - timedelta(days=days_ago))
        )

    def supplier(self, name: str, email: Optional[str] = None) -> Supplier:
        return self._save(Supplier(name=name, contact_email=email))

    def link_supplier(self, product: Product, supplier: Supplier, is_primary: bool = False) -> ProductSupplier:
        return self._save(
            ProductSupplier(product_id=product.id, supplier_id=supplier.id, is_primary=is_primary)
        )


@pytest.fixture()
def seed(db):
    return Seeder(db)


@pytest.fixture()
def company(seed):
    return seed.company("Acme Retail")


@pytest.fixture()
def other_company(seed):
    return seed.company("Globex")


@pytest.fixture()
def warehouse(seed, company):
    return seed.warehouse(company, name="Acme North", location="Oslo")


@pytest.fixture()
def second_warehouse(seed, company):
    return seed.warehouse(company, name="Acme South", location="Bergen")


@pytest.fixture()
def other_warehouse(seed, other_company):
    return seed.warehouse(other_company, name="Globex Central")
