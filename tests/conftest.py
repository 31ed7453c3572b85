"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from typing import Generator, List
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sales_dashboard.api.dependencies import get_repository, get_seed_client
from sales_dashboard.api.main import create_app
from sales_dashboard.domain.models import TransactionRecord
from sales_dashboard.domain.repository import InMemoryTransactionRepository
from sales_dashboard.infrastructure.database.models import Base
from sales_dashboard.infrastructure.database.session import get_db


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_record(
    id: int,
    price: str = "10.00",
    sold: bool = True,
    sale_date: date = date(2022, 3, 1),
    title: str = "Item",
    description: str = "",
    category: str = "misc",
) -> TransactionRecord:
    return TransactionRecord(
        id=id,
        title=title,
        description=description,
        category=category,
        price=Decimal(price),
        date_of_sale=sale_date,
        sold=sold,
    )


class FakeSeedSource:
    """Stand-in for SeedSourceClient returning canned records or raising"""

    def __init__(self, records: List[TransactionRecord] | None = None, error: Exception | None = None):
        self.records = records or []
        self.error = error
        self.calls: List[str] = []

    async def fetch_records(self, source_url: str) -> List[TransactionRecord]:
        self.calls.append(source_url)
        if self.error is not None:
            raise self.error
        return list(self.records)


@pytest.fixture
def sample_records() -> List[TransactionRecord]:
    """Records spread over several months, with prices on bucket edges"""
    return [
        make_record(1, "50.00", True, date(2023, 3, 1), "Cotton Shirt", "Slim fit", "men's clothing"),
        make_record(2, "150.00", False, date(2023, 3, 15), "Denim Jacket", "Blue denim", "women's clothing"),
        make_record(3, "100.00", True, date(2022, 3, 20), "Gold Ring", "Plated shirt stud", "jewelery"),
        make_record(4, "100.01", False, date(2021, 4, 2), "Shirt Pack", "Three SHIRTS", "men's clothing"),
        make_record(5, "900.00", True, date(2022, 4, 10), "Hard Drive", "2TB USB 3.0", "electronics"),
        make_record(6, "900.50", True, date(2022, 11, 5), "Laptop", "14 inch", "electronics"),
        make_record(7, "6950.00", False, date(2022, 11, 27), "Dragon Bracelet", "Gold and silver", "jewelery"),
        make_record(8, "0.00", False, date(2021, 12, 31), "Sticker", "Free gift", "electronics"),
    ]


@pytest.fixture
def repository(sample_records) -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository(sample_records)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seed_source(sample_records) -> FakeSeedSource:
    return FakeSeedSource(sample_records)


@pytest.fixture
def client(db: Session, repository: InMemoryTransactionRepository, seed_source: FakeSeedSource) -> TestClient:
    """Create FastAPI test client backed by the in-memory store"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_seed_client] = lambda: seed_source
    return TestClient(app)


@pytest.fixture
def sql_client(db: Session, seed_source: FakeSeedSource) -> TestClient:
    """Create FastAPI test client backed by the SQL store on the test database"""
    app = create_app()

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_seed_client] = lambda: seed_source
    return TestClient(app, raise_server_exceptions=False)
