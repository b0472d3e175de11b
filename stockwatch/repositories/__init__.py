# Repository Layer — Data Access (Repository Pattern, GoF)
from stockwatch.repositories.base import BaseRepository
from stockwatch.repositories.warehouse_repository import WarehouseRepository
from stockwatch.repositories.product_repository import ProductRepository
from stockwatch.repositories.inventory_repository import InventoryRepository
from stockwatch.repositories.sale_repository import SaleRepository
from stockwatch.repositories.supplier_repository import SupplierRepository

__all__ = [
    "BaseRepository",
    "WarehouseRepository",
    "ProductRepository",
    "InventoryRepository",
    "SaleRepository",
    "SupplierRepository",
]
