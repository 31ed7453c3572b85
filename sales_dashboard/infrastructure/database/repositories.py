"""Data access layer for seeded transactions"""

from decimal import Decimal
from typing import Iterable, List, Optional
from sqlalchemy import delete, extract, func, select
from sqlalchemy.orm import Session
from sales_dashboard.infrastructure.database.models import ProductTransaction
from sales_dashboard.domain.models import TransactionRecord


class SqlTransactionRepository:
    """Repository for product transactions, bound to one session"""

    def __init__(self, db: Session):
        self.db = db

    def replace_all(self, records: Iterable[TransactionRecord]) -> int:
        """Delete all rows and insert the given records (caller commits)"""
        self.db.execute(delete(ProductTransaction))
        self.db.expunge_all()  # Old rows may share ids with the new ones

        rows = [
            ProductTransaction(
                id=record.id,
                title=record.title,
                description=record.description,
                category=record.category,
                price=record.price,
                date_of_sale=record.date_of_sale,
                sold=record.sold,
                image=record.image,
            )
            for record in records
        ]
        self.db.add_all(rows)
        self.db.flush()  # Surface constraint errors before commit
        return len(rows)

    def find(self, month: Optional[int] = None) -> List[TransactionRecord]:
        """Fetch records for a calendar month (all months when None), ordered by id"""
        stmt = select(ProductTransaction).order_by(ProductTransaction.id)
        if month is not None:
            stmt = stmt.where(extract("month", ProductTransaction.date_of_sale) == month)

        return [_to_record(row) for row in self.db.scalars(stmt)]

    def count(self) -> int:
        return self.db.scalar(select(func.count()).select_from(ProductTransaction)) or 0


def _to_record(row: ProductTransaction) -> TransactionRecord:
    return TransactionRecord(
        id=row.id,
        title=row.title,
        description=row.description,
        category=row.category,
        price=Decimal(row.price).quantize(Decimal("0.01")),
        date_of_sale=row.date_of_sale,
        sold=row.sold,
        image=row.image,
    )
