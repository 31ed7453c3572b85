"""Unit tests for seeding the record store"""

import asyncio
import pytest
from conftest import FakeSeedSource, make_record
from sales_dashboard.domain.exceptions import SeedSourceError
from sales_dashboard.domain.repository import InMemoryTransactionRepository
from sales_dashboard.domain.seeding import seed_from_source

SOURCE_URL = "http://seed.test/product_transaction.json"


async def test_seed_inserts_all_records(sample_records):
    repo = InMemoryTransactionRepository()
    source = FakeSeedSource(sample_records)

    inserted = await seed_from_source(repo, source, SOURCE_URL)

    assert inserted == len(sample_records)
    assert repo.count() == len(sample_records)
    assert source.calls == [SOURCE_URL]


async def test_seed_is_idempotent(sample_records):
    repo = InMemoryTransactionRepository()
    source = FakeSeedSource(sample_records)

    await seed_from_source(repo, source, SOURCE_URL)
    await seed_from_source(repo, source, SOURCE_URL)

    assert repo.count() == len(sample_records)
    assert [r.id for r in repo.find()] == sorted(r.id for r in sample_records)


async def test_seed_replaces_previous_data():
    repo = InMemoryTransactionRepository([make_record(99)])

    await seed_from_source(repo, FakeSeedSource([make_record(1), make_record(2)]), SOURCE_URL)

    assert [r.id for r in repo.find()] == [1, 2]


async def test_failed_seed_leaves_store_untouched(sample_records):
    repo = InMemoryTransactionRepository(sample_records)
    committed = []

    with pytest.raises(SeedSourceError):
        await seed_from_source(
            repo,
            FakeSeedSource(error=SeedSourceError("unreachable")),
            SOURCE_URL,
            commit=lambda: committed.append(True),
        )

    assert repo.count() == len(sample_records)
    assert committed == []


async def test_seed_commits_after_insert(sample_records):
    repo = InMemoryTransactionRepository()
    seen_at_commit = []

    await seed_from_source(
        repo,
        FakeSeedSource(sample_records),
        SOURCE_URL,
        commit=lambda: seen_at_commit.append(repo.count()),
    )

    assert seen_at_commit == [len(sample_records)]


class SlowSource(FakeSeedSource):
    """Yields to the event loop mid-fetch and tracks overlapping fetches"""

    active = 0
    max_active = 0

    async def fetch_records(self, source_url):
        SlowSource.active += 1
        SlowSource.max_active = max(SlowSource.max_active, SlowSource.active)
        await asyncio.sleep(0.01)
        SlowSource.active -= 1
        return await super().fetch_records(source_url)


async def test_concurrent_seeds_run_one_at_a_time(sample_records):
    repo = InMemoryTransactionRepository()
    source = SlowSource(sample_records)

    results = await asyncio.gather(*(seed_from_source(repo, source, SOURCE_URL) for _ in range(3)))

    assert results == [len(sample_records)] * 3
    assert SlowSource.max_active == 1
    assert repo.count() == len(sample_records)
