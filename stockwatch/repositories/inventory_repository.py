"""
Inventory Repository
"""
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session, contains_eager

from stockwatch.models.inventory import Inventory
from stockwatch.models.warehouse import Warehouse
from stockwatch.repositories.base import BaseRepository


class InventoryRepository(BaseRepository[Inventory]):

    def __init__(self, db: Session):
        super().__init__(Inventory, db)

    def list_for_products(
        self,
        product_ids: Iterable[int],
        company_id: Optional[int] = None,
    ) -> List[Inventory]:
        """
        Inventory rows for a set of products, with each row's warehouse loaded
        in the same query. ``company_id`` narrows the rows to that company's
        warehouses.
        """
        id_set = set(product_ids)
        if not id_set:
            return []
        q = (
            self.db.query(Inventory)
            .join(Inventory.warehouse)
            .options(contains_eager(Inventory.warehouse))
            .filter(Inventory.product_id.in_(id_set))
        )
        if company_id is not None:
            q = q.filter(Warehouse.company_id == company_id)
        return q.order_by(Inventory.product_id, Inventory.warehouse_id).all()
