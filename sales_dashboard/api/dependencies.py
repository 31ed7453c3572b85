"""Dependency injection for FastAPI endpoints"""

from typing import Optional

from fastapi import Depends, Query, Request
from sqlalchemy.orm import Session

from sales_dashboard.domain.repository import TransactionRepository
from sales_dashboard.infrastructure.clients.seed_source import SeedSourceClient
from sales_dashboard.infrastructure.database.repositories import SqlTransactionRepository
from sales_dashboard.infrastructure.database.session import get_db
from sales_dashboard.utils.date_utils import parse_month


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_repository(db: Session = Depends(get_db)) -> TransactionRepository:
    """Provide the record store for this request"""
    return SqlTransactionRepository(db)


def get_seed_client() -> SeedSourceClient:
    """Provide seed dataset client instance"""
    return SeedSourceClient()


def get_month(
    month: Optional[str] = Query(
        None,
        description="Month 1-12 or English month name; omit for all months",
    ),
) -> Optional[int]:
    """Parse the shared ?month= parameter (raises InvalidQueryError on bad input)"""
    return parse_month(month)
