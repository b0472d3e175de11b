"""
Alerts Router — Thin Controller (SRP / DIP)
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from stockwatch.database import get_db
from stockwatch.schemas.alert import LowStockAlertListResponse
from stockwatch.services.stock_alert_service import StockAlertService

# Mounted at the root and under /api/companies; see stockwatch.main.
router = APIRouter(tags=["Stock Alerts"])


def get_stock_alert_service(db: Session = Depends(get_db)) -> StockAlertService:
    return StockAlertService(db)


@router.get("/{company_id}/alerts/low-stock", response_model=LowStockAlertListResponse)
def low_stock_alerts(
    company_id: int,
    service: StockAlertService = Depends(get_stock_alert_service),
):
    return service.compute_low_stock_alerts(company_id)
