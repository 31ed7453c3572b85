"""GET /statistics, /bar-chart, /pie-chart - Month totals and chart data"""

from typing import List, Optional
from fastapi import APIRouter, Depends

from sales_dashboard.api.routes.schemas import (
    CategorySchema,
    PriceRangeSchema,
    StatisticsResponse,
    category_slices,
)
from sales_dashboard.api.dependencies import get_month, get_repository
from sales_dashboard.domain.repository import TransactionRepository
from sales_dashboard.domain.statistics import (
    category_histogram,
    month_statistics,
    price_range_histogram,
)
from sales_dashboard.infrastructure.observability.metrics import record_query

router = APIRouter()


@router.get("/statistics", response_model=StatisticsResponse)
def get_statistics(
    month: Optional[int] = Depends(get_month),
    repository: TransactionRepository = Depends(get_repository),
):
    """Total sale amount plus sold and unsold item counts"""
    record_query("statistics", month)
    return StatisticsResponse.from_statistics(month_statistics(repository, month))


@router.get("/bar-chart", response_model=List[PriceRangeSchema])
def get_bar_chart(
    month: Optional[int] = Depends(get_month),
    repository: TransactionRepository = Depends(get_repository),
):
    """Item counts for the ten fixed price ranges, lowest first"""
    record_query("bar_chart", month)
    return [PriceRangeSchema.from_bucket(b) for b in price_range_histogram(repository, month)]


@router.get("/pie-chart", response_model=List[CategorySchema])
def get_pie_chart(
    month: Optional[int] = Depends(get_month),
    repository: TransactionRepository = Depends(get_repository),
):
    record_query("pie_chart", month)
    return category_slices(category_histogram(repository, month))
