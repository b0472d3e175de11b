"""
Stock Alert Service — Service Layer (SRP / DIP)

Computes low-stock alerts for one company from inventory snapshots and a
rolling window of sales. Every lookup is batched by id set; nothing in the
per-row loop touches the database.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from stockwatch.config import Settings, settings as app_settings
from stockwatch.database import read_scope
from stockwatch.models.inventory import Inventory
from stockwatch.models.product import Product
from stockwatch.models.supplier import Supplier
from stockwatch.repositories.inventory_repository import InventoryRepository
from stockwatch.repositories.product_repository import ProductRepository
from stockwatch.repositories.sale_repository import SaleRepository
from stockwatch.repositories.supplier_repository import SupplierRepository
from stockwatch.schemas.alert import LowStockAlert, LowStockAlertListResponse, SupplierSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlertPolicy:
    """
    Tunables for the alert computation.

    lookback_days: length of the trailing sales window. It is also the divisor
        for the average daily rate, whether or not every day saw a sale.
    default_threshold: low-stock boundary for products without their own
        ``threshold``.
    """

    lookback_days: int = 30
    default_threshold: int = 10

    def __post_init__(self):
        if self.lookback_days < 1:
            raise ValueError("lookback_days must be at least 1")
        if self.default_threshold < 0:
            raise ValueError("default_threshold cannot be negative")

    @classmethod
    def from_settings(cls, settings: Settings) -> "AlertPolicy":
        return cls(
            lookback_days=settings.LOW_STOCK_LOOKBACK_DAYS,
            default_threshold=settings.LOW_STOCK_DEFAULT_THRESHOLD,
        )

    def effective_threshold(self, product: Product) -> int:
        return product.threshold if product.threshold is not None else self.default_threshold

    def average_daily_sales(self, units_sold: int) -> float:
        return units_sold / self.lookback_days

    def days_until_stockout(self, quantity: int, units_sold: int) -> Optional[int]:
        """ceil(quantity / (units_sold / lookback_days)), or None without a sales rate."""
        if units_sold <= 0:
            return None
        return -(-quantity * self.lookback_days // units_sold)


class StockAlertService:

    def __init__(self, db: Session, policy: Optional[AlertPolicy] = None):
        self._db = db
        self._policy = policy or AlertPolicy.from_settings(app_settings)
        self._sale_repo = SaleRepository(db)
        self._inventory_repo = InventoryRepository(db)
        self._product_repo = ProductRepository(db)
        self._supplier_repo = SupplierRepository(db)

    def compute_low_stock_alerts(
        self,
        company_id: int,
        now: Optional[datetime] = None,
    ) -> LowStockAlertListResponse:
        now = now or datetime.now(timezone.utc).replace(tzinfo=None)
        cutoff = now - timedelta(days=self._policy.lookback_days)

        with read_scope(self._db, "low_stock_alerts"):
            units_sold = {
                product_id: total
                for product_id, total in self._sale_repo.total_quantity_by_product_since(cutoff).items()
                if total > 0
            }
            if not units_sold:
                logger.info("low_stock_alerts company_id=%s active_products=0 alerts=0", company_id)
                return LowStockAlertListResponse(alerts=[], total_alerts=0)

            rows = self._inventory_repo.list_for_products(units_sold.keys(), company_id=company_id)
            product_ids = {row.product_id for row in rows}
            products = self._product_repo.get_many_by_ids(product_ids)
            suppliers = self._supplier_repo.preferred_for_products(product_ids)

            alerts: List[LowStockAlert] = []
            for row in rows:
                alert = self._build_alert(row, company_id, products, suppliers, units_sold)
                if alert is not None:
                    alerts.append(alert)

        alerts.sort(key=lambda a: (a.product_id, a.warehouse_id))
        logger.info(
            "low_stock_alerts company_id=%s active_products=%s candidates=%s alerts=%s",
            company_id,
            len(units_sold),
            len(rows),
            len(alerts),
        )
        return LowStockAlertListResponse(alerts=alerts, total_alerts=len(alerts))

    def _build_alert(
        self,
        row: Inventory,
        company_id: int,
        products: Dict[int, Product],
        suppliers: Dict[int, Supplier],
        units_sold: Dict[int, int],
    ) -> Optional[LowStockAlert]:
        warehouse = row.warehouse
        if warehouse is None or warehouse.company_id != company_id:
            return None

        product = products.get(row.product_id)
        if product is None:
            logger.warning(
                "low_stock_alerts_dangling_product inventory_id=%s product_id=%s",
                row.id,
                row.product_id,
            )
            return None

        threshold = self._policy.effective_threshold(product)
        if row.quantity >= threshold:
            return None

        sold = units_sold.get(row.product_id, 0)
        supplier = suppliers.get(row.product_id)
        return LowStockAlert(
            product_id=product.id,
            product_name=product.name,
            sku=product.sku,
            warehouse_id=warehouse.id,
            warehouse_name=warehouse.name,
            current_stock=row.quantity,
            threshold=threshold,
            days_until_stockout=self._policy.days_until_stockout(row.quantity, sold),
            avg_daily_sales=round(self._policy.average_daily_sales(sold), 2),
            supplier=SupplierSummary.model_validate(supplier) if supplier is not None else None,
        )
