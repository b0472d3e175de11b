from sqlalchemy import Boolean, Column, Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship

from stockwatch.database import Base


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    contact_email = Column(String(255), nullable=True)

    product_links = relationship("ProductSupplier", back_populates="supplier")


class ProductSupplier(Base):
    __tablename__ = "product_suppliers"
    __table_args__ = (
        Index("ix_product_suppliers_supplier_id", "supplier_id"),
    )

    product_id = Column(Integer, ForeignKey("products.id"), primary_key=True)
    supplier_id = Column(Integer, ForeignKey("suppliers.id"), primary_key=True)
    is_primary = Column(Boolean, nullable=False, default=False)

    supplier = relationship("Supplier", back_populates="product_links")
