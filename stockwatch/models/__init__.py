from stockwatch.models.company import Company
from stockwatch.models.warehouse import Warehouse
from stockwatch.models.product import Product, BundleItem
from stockwatch.models.inventory import Inventory
from stockwatch.models.sale import Sale
from stockwatch.models.supplier import Supplier, ProductSupplier

__all__ = [
    "Company",
    "Warehouse",
    "Product",
    "BundleItem",
    "Inventory",
    "Sale",
    "Supplier",
    "ProductSupplier",
]
