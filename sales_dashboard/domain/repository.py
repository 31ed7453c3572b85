"""Record store interface and the in-memory implementation"""

from typing import Iterable, List, Optional, Protocol

from sales_dashboard.domain.models import TransactionRecord


class TransactionRepository(Protocol):
    """Storage for seeded transaction records"""

    def replace_all(self, records: Iterable[TransactionRecord]) -> int:
        """Drop every stored record and insert the given ones; return count inserted"""
        ...

    def find(self, month: Optional[int] = None) -> List[TransactionRecord]:
        """Records sold in the given calendar month (any year), ordered by id"""
        ...

    def count(self) -> int:
        ...


class InMemoryTransactionRepository:
    """Dict-backed record store, used for tests and local runs"""

    def __init__(self, records: Iterable[TransactionRecord] = ()):
        self._records: dict[int, TransactionRecord] = {}
        self.replace_all(records)

    def replace_all(self, records: Iterable[TransactionRecord]) -> int:
        fresh = {}
        for record in records:
            fresh[record.id] = record
        self._records = fresh
        return len(fresh)

    def find(self, month: Optional[int] = None) -> List[TransactionRecord]:
        return [
            record
            for _, record in sorted(self._records.items())
            if month is None or record.date_of_sale.month == month
        ]

    def count(self) -> int:
        return len(self._records)
