"""
Catalog Service — Service Layer (SRP / DIP)

Onboards a product and its first inventory row as one unit of work.
"""
import logging
from typing import Any, Mapping, Union

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from stockwatch.core.exceptions import (
    ConflictException,
    EntityNotFoundException,
    ServerException,
    ValidationException,
)
from stockwatch.database import transaction
from stockwatch.models.inventory import Inventory
from stockwatch.models.product import Product
from stockwatch.repositories.inventory_repository import InventoryRepository
from stockwatch.repositories.product_repository import ProductRepository
from stockwatch.repositories.warehouse_repository import WarehouseRepository
from stockwatch.schemas.product import ProductCreate

logger = logging.getLogger(__name__)


class CatalogService:

    def __init__(self, db: Session):
        self._db = db
        self._product_repo = ProductRepository(db)
        self._inventory_repo = InventoryRepository(db)
        self._warehouse_repo = WarehouseRepository(db)

    @staticmethod
    def parse_payload(payload: Union[ProductCreate, Mapping[str, Any]]) -> ProductCreate:
        if isinstance(payload, ProductCreate):
            return payload
        try:
            return ProductCreate.model_validate(payload)
        except ValidationError as exc:
            fields = sorted({".".join(str(part) for part in err["loc"]) for err in exc.errors()})
            raise ValidationException(
                f"Missing or invalid fields: {', '.join(fields)}",
                fields=fields,
            ) from exc

    def create_product_with_inventory(self, payload: Union[ProductCreate, Mapping[str, Any]]) -> Product:
        data = self.parse_payload(payload)

        try:
            if self._product_repo.get_by_sku(data.sku) is not None:
                raise ConflictException(f"SKU '{data.sku}' already exists.", {"sku": data.sku})
            if self._warehouse_repo.get_by_id(data.warehouse_id) is None:
                raise EntityNotFoundException("Warehouse", data.warehouse_id)

            with transaction(self._db):
                product = self._product_repo.add(
                    Product(
                        name=data.name,
                        sku=data.sku,
                        price=data.price,
                        is_bundle=False,
                    )
                )
                self._inventory_repo.add(
                    Inventory(
                        warehouse_id=data.warehouse_id,
                        product_id=product.id,
                        quantity=data.initial_quantity,
                    )
                )
        except IntegrityError as exc:
            # transaction() has already rolled back; find out which rule lost.
            raise self._resolve_integrity_error(data, exc) from exc
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.error("product_create_failed sku=%s", data.sku, exc_info=True)
            raise ServerException("Failed to create product.") from exc

        logger.info(
            "product_created product_id=%s sku=%s warehouse_id=%s initial_quantity=%s",
            product.id,
            product.sku,
            data.warehouse_id,
            data.initial_quantity,
        )
        return product

    def _resolve_integrity_error(self, data: ProductCreate, exc: IntegrityError) -> Exception:
        try:
            if self._product_repo.get_by_sku(data.sku) is not None:
                logger.info("product_create_conflict sku=%s source=constraint", data.sku)
                return ConflictException(f"SKU '{data.sku}' already exists.", {"sku": data.sku})
            if self._warehouse_repo.get_by_id(data.warehouse_id) is None:
                return EntityNotFoundException("Warehouse", data.warehouse_id)
        except SQLAlchemyError:
            logger.error("product_create_recheck_failed sku=%s", data.sku, exc_info=True)
        finally:
            self._db.rollback()
        logger.error("product_create_integrity_error sku=%s error=%s", data.sku, exc.orig)
        return ServerException("Failed to create product.")
