"""GET /combined - Every dashboard view for a month in one response"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from sales_dashboard.api.routes.schemas import CombinedResponse
from sales_dashboard.api.dependencies import get_month, get_repository
from sales_dashboard.domain.aggregation import combined_view
from sales_dashboard.domain.repository import TransactionRepository
from sales_dashboard.infrastructure.observability.metrics import record_query

router = APIRouter()


@router.get("/combined", response_model=CombinedResponse)
def get_combined(
    search: Optional[str] = Query(None),
    page: int = Query(1),
    per_page: Optional[int] = Query(None, alias="perPage"),
    month: Optional[int] = Depends(get_month),
    repository: TransactionRepository = Depends(get_repository),
):
    """
    Transactions, statistics, bar chart and pie chart together.

    Each part is identical to the corresponding standalone endpoint called
    with the same parameters. If any part fails the whole request fails.
    """
    view = combined_view(repository, month, search, page, per_page)
    record_query("combined", month)
    return CombinedResponse.from_view(view)
