"""
Products Router — Thin Controller (SRP / DIP)
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from stockwatch.database import get_db
from stockwatch.schemas.product import ProductCreate, ProductCreatedResponse
from stockwatch.services.catalog_service import CatalogService

router = APIRouter(prefix="/products", tags=["Catalog"])


def get_catalog_service(db: Session = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


@router.post("", response_model=ProductCreatedResponse, status_code=201)
def create_product(
    payload: ProductCreate,
    service: CatalogService = Depends(get_catalog_service),
):
    product = service.create_product_with_inventory(payload)
    return ProductCreatedResponse(message="Product created", product_id=product.id)
