from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Largest value an Integer column stores on every supported backend.
INT32_MAX = 2_147_483_647


class ProductCreate(BaseModel):
    """Request body for creating a product together with its first inventory row."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    sku: str = Field(..., min_length=1, max_length=64)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    warehouse_id: int = Field(..., le=INT32_MAX, strict=True)
    initial_quantity: int = Field(..., ge=0, le=INT32_MAX, strict=True)

    @field_validator("price", mode="before")
    @classmethod
    def price_must_be_numeric(cls, value: Any) -> Decimal:
        # Numeric strings such as "12.50" are rejected rather than coerced.
        if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
            raise ValueError("price must be a number")
        price = Decimal(str(value))
        if not price.is_finite():
            raise ValueError("price must be a finite number")
        return price


class ProductCreatedResponse(BaseModel):
    message: str = "Product created"
    product_id: int
