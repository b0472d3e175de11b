"""
Supplier Repository
"""
from typing import Dict, Iterable

from sqlalchemy.orm import Session, contains_eager

from stockwatch.models.supplier import ProductSupplier, Supplier
from stockwatch.repositories.base import BaseRepository


class SupplierRepository(BaseRepository[Supplier]):

    def __init__(self, db: Session):
        super().__init__(Supplier, db)

    def preferred_for_products(self, product_ids: Iterable[int]) -> Dict[int, Supplier]:
        """
        One supplier per product, fetched with a single query.

        A link flagged ``is_primary`` wins; otherwise, and among several
        primaries, the lowest supplier id is chosen.
        """
        id_set = set(product_ids)
        if not id_set:
            return {}
        links = (
            self.db.query(ProductSupplier)
            .join(ProductSupplier.supplier)
            .options(contains_eager(ProductSupplier.supplier))
            .filter(ProductSupplier.product_id.in_(id_set))
            .order_by(
                ProductSupplier.product_id,
                ProductSupplier.is_primary.desc(),
                ProductSupplier.supplier_id,
            )
            .all()
        )
        chosen: Dict[int, Supplier] = {}
        for link in links:
            chosen.setdefault(link.product_id, link.supplier)
        return chosen
