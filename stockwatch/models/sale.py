from sqlalchemy import Column, Integer, DateTime, ForeignKey, CheckConstraint, Index

from stockwatch.database import Base


class Sale(Base):
    """Append-only sales fact, written by the sales subsystem."""

    __tablename__ = "sales"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_sales_quantity_positive"),
        Index("ix_sales_product_sale_date", "product_id", "sale_date"),
    )

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    sale_date = Column(DateTime, nullable=False, index=True)
