"""Pydantic schemas for API responses"""

from pydantic import BaseModel, ConfigDict, Field
from datetime import date
from typing import Dict, List, Optional

from sales_dashboard.domain.models import (
    CombinedView,
    MonthStatistics,
    PriceRangeBucket,
    TransactionRecord,
)


class CamelModel(BaseModel):
    """Serializes with the camelCase keys the dashboard expects"""

    model_config = ConfigDict(populate_by_name=True)


class TransactionSchema(CamelModel):
    """Single transaction row"""

    id: int
    title: str
    description: str
    category: str
    price: float
    date_of_sale: date = Field(..., alias="dateOfSale")
    sold: bool
    image: Optional[str] = None

    @classmethod
    def from_record(cls, record: TransactionRecord) -> "TransactionSchema":
        return cls(
            id=record.id,
            title=record.title,
            description=record.description,
            category=record.category,
            price=float(record.price),
            date_of_sale=record.date_of_sale,
            sold=record.sold,
            image=record.image,
        )


class StatisticsResponse(CamelModel):
    """Response for GET /statistics"""

    total_sale_amount: float = Field(..., alias="totalSaleAmount")
    sold_count: int = Field(..., alias="soldCount")
    unsold_count: int = Field(..., alias="unsoldCount")

    @classmethod
    def from_statistics(cls, stats: MonthStatistics) -> "StatisticsResponse":
        return cls(
            total_sale_amount=float(stats.total_sale_amount),
            sold_count=stats.sold_count,
            unsold_count=stats.unsold_count,
        )


class PriceRangeSchema(BaseModel):
    """Single bar in GET /bar-chart"""

    range: str
    count: int

    @classmethod
    def from_bucket(cls, bucket: PriceRangeBucket) -> "PriceRangeSchema":
        return cls(range=bucket.range, count=bucket.count)


class CategorySchema(BaseModel):
    """Single slice in GET /pie-chart"""

    category: str
    count: int


def category_slices(histogram: Dict[str, int]) -> List[CategorySchema]:
    return [CategorySchema(category=name, count=count) for name, count in histogram.items()]


class CombinedResponse(CamelModel):
    """Response for GET /combined"""

    transactions: List[TransactionSchema]
    statistics: StatisticsResponse
    bar_chart: List[PriceRangeSchema] = Field(..., alias="barChart")
    pie_chart: List[CategorySchema] = Field(..., alias="pieChart")

    @classmethod
    def from_view(cls, view: CombinedView) -> "CombinedResponse":
        return cls(
            transactions=[TransactionSchema.from_record(r) for r in view.transactions.items],
            statistics=StatisticsResponse.from_statistics(view.statistics),
            bar_chart=[PriceRangeSchema.from_bucket(b) for b in view.price_range_histogram],
            pie_chart=category_slices(view.category_histogram),
        )


class InitializeResponse(BaseModel):
    """Response for /initialize"""

    message: str
    inserted: int


class HealthResponse(BaseModel):
    status: str
    service: str
    records: int
