from sqlalchemy.orm import Session

from stockwatch.models.warehouse import Warehouse
from stockwatch.repositories.base import BaseRepository


class WarehouseRepository(BaseRepository[Warehouse]):
    def __init__(self, db: Session):
        super().__init__(Warehouse, db)
