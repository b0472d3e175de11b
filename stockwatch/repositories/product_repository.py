"""
Product Repository
"""
from typing import Optional

from sqlalchemy.orm import Session

from stockwatch.models.product import Product
from stockwatch.repositories.base import BaseRepository


class ProductRepository(BaseRepository[Product]):

    def __init__(self, db: Session):
        super().__init__(Product, db)

    def get_by_sku(self, sku: str) -> Optional[Product]:
        # Exact, case-sensitive match; the unique index is the final arbiter.
        return self.db.query(Product).filter(Product.sku == sku).first()
