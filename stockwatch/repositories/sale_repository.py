"""
Sale Repository — read-only access to the append-only sales facts.
"""
from datetime import datetime
from typing import Dict

from sqlalchemy import func
from sqlalchemy.orm import Session

from stockwatch.models.sale import Sale
from stockwatch.repositories.base import BaseRepository


class SaleRepository(BaseRepository[Sale]):

    def __init__(self, db: Session):
        super().__init__(Sale, db)

    def total_quantity_by_product_since(self, cutoff: datetime) -> Dict[int, int]:
        """Units sold per product with ``sale_date >= cutoff``."""
        rows = (
            self.db.query(Sale.product_id, func.sum(Sale.quantity).label("total_quantity"))
            .filter(Sale.sale_date >= cutoff)
            .group_by(Sale.product_id)
            .all()
        )
        return {row.product_id: int(row.total_quantity or 0) for row in rows}
