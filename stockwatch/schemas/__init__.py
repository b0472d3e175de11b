from stockwatch.schemas.product import ProductCreate, ProductCreatedResponse
from stockwatch.schemas.alert import SupplierSummary, LowStockAlert, LowStockAlertListResponse

__all__ = [
    "ProductCreate",
    "ProductCreatedResponse",
    "SupplierSummary",
    "LowStockAlert",
    "LowStockAlertListResponse",
]
