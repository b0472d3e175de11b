from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship

from stockwatch.database import Base


class Company(Base):
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=func.now())

    warehouses = relationship("Warehouse", back_populates="company")
