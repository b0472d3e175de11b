from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    func,
)
from sqlalchemy.orm import relationship

from stockwatch.database import Base


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("threshold IS NULL OR threshold >= 0", name="ck_products_threshold_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    sku = Column(String(64), unique=True, nullable=False, index=True)
    price = Column(Numeric(12, 2), nullable=False)
    is_bundle = Column(Boolean, nullable=False, default=False)
    # None means the system-wide default threshold applies.
    threshold = Column(Integer, nullable=True)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    inventory = relationship("Inventory", back_populates="product")
    bundle_items = relationship(
        "BundleItem",
        foreign_keys="BundleItem.bundle_product_id",
        back_populates="bundle",
    )


class BundleItem(Base):
    """Component of a bundle product. Stored only; never resolved here."""

    __tablename__ = "product_bundle_items"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_product_bundle_items_quantity_positive"),
        CheckConstraint(
            "bundle_product_id <> component_product_id",
            name="ck_product_bundle_items_not_self",
        ),
    )

    bundle_product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    component_product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    quantity = Column(Integer, nullable=False, default=1)

    bundle = relationship("Product", foreign_keys=[bundle_product_id], back_populates="bundle_items")
    component = relationship("Product", foreign_keys=[component_product_id])
