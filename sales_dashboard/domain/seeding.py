"""Seeding the record store from the remote product-transaction dataset"""

import asyncio
from typing import Callable, List, Optional, Protocol

from sales_dashboard.domain.models import TransactionRecord
from sales_dashboard.domain.repository import TransactionRepository

# Serializes seeding within a process; run a single seeding worker per database
_seed_lock = asyncio.Lock()


class SeedSource(Protocol):
    async def fetch_records(self, source_url: str) -> List[TransactionRecord]:
        ...


async def seed_from_source(
    repository: TransactionRepository,
    source: SeedSource,
    source_url: str,
    commit: Optional[Callable[[], None]] = None,
) -> int:
    """
    Replace the store contents with the dataset at source_url.

    The whole dataset is downloaded and parsed before the store is touched,
    and the store is cleared before inserting, so calling this twice leaves
    a single copy of the data. Concurrent calls run one at a time, and
    `commit` (if given) runs while the lock is still held.

    Returns:
        Number of records inserted

    Raises:
        SeedSourceError: Source unreachable or dataset malformed
    """
    async with _seed_lock:
        records = await source.fetch_records(source_url)
        inserted = repository.replace_all(records)
        if commit is not None:
            commit()

    return inserted
