"""SQLAlchemy ORM models"""

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, Numeric, Text
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class ProductTransaction(Base):
    """Seeded product sale, one row per dataset record"""

    __tablename__ = "product_transaction"

    id = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    category = Column(Text, nullable=False, index=True)
    price = Column(Numeric(12, 2, asdecimal=True), nullable=False)
    date_of_sale = Column(Date, nullable=False, index=True)
    sold = Column(Boolean, nullable=False)
    image = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
