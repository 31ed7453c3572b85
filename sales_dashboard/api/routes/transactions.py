"""GET /transactions - Search and paginate transactions"""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response

from sales_dashboard.api.routes.schemas import TransactionSchema
from sales_dashboard.api.dependencies import get_month, get_repository
from sales_dashboard.domain.query import list_transactions
from sales_dashboard.domain.repository import TransactionRepository
from sales_dashboard.infrastructure.observability.metrics import record_query

router = APIRouter()


@router.get("/transactions", response_model=List[TransactionSchema])
def get_transactions(
    response: Response,
    search: Optional[str] = Query(None, description="Matches title, description or price"),
    page: int = Query(1, description="1-indexed page number"),
    per_page: Optional[int] = Query(None, alias="perPage", description="Records per page"),
    month: Optional[int] = Depends(get_month),
    repository: TransactionRepository = Depends(get_repository),
):
    """
    List transactions for a month, filtered by search text.

    Returns:
        JSON array of transactions; paging totals are in the X-Total-Count,
        X-Page and X-Per-Page headers
    """
    result = list_transactions(repository, search, month, page, per_page)
    record_query("transactions", month)

    response.headers["X-Total-Count"] = str(result.total_matches)
    response.headers["X-Page"] = str(result.page)
    response.headers["X-Per-Page"] = str(result.per_page)

    return [TransactionSchema.from_record(r) for r in result.items]
