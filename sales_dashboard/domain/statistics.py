"""Monthly sales statistics and chart histograms"""

from decimal import ROUND_CEILING, Decimal
from typing import Dict, List, Optional

from sales_dashboard.domain.models import MonthStatistics, PriceRangeBucket
from sales_dashboard.domain.repository import TransactionRepository
from sales_dashboard.utils.date_utils import validate_month

BUCKET_WIDTH = Decimal(100)

# Bucket k (k < 9) holds 100k < price <= 100(k+1); the last bucket holds price > 900
PRICE_RANGE_LABELS = [
    "0-100",
    "101-200",
    "201-300",
    "301-400",
    "401-500",
    "501-600",
    "601-700",
    "701-800",
    "801-900",
    "901-above",
]


def price_bucket_index(price: Decimal) -> int:
    """
    Map a price to its bucket in PRICE_RANGE_LABELS.

    Upper bounds are inclusive: 100 -> "0-100", 100.01 -> "101-200",
    900 -> "801-900", 900.50 -> "901-above".
    """
    if price <= BUCKET_WIDTH:
        return 0
    index = int((price / BUCKET_WIDTH).to_integral_value(rounding=ROUND_CEILING)) - 1
    return min(index, len(PRICE_RANGE_LABELS) - 1)


def month_statistics(repository: TransactionRepository, month: Optional[int]) -> MonthStatistics:
    """
    Total sale amount and sold/unsold counts for a month.

    A month with no records yields zeros.
    """
    validate_month(month)
    records = repository.find(month)

    sold = [r for r in records if r.sold]
    total = sum((r.price for r in sold), Decimal("0"))

    return MonthStatistics(
        total_sale_amount=total.quantize(Decimal("0.01")),
        sold_count=len(sold),
        unsold_count=len(records) - len(sold),
    )


def price_range_histogram(
    repository: TransactionRepository, month: Optional[int]
) -> List[PriceRangeBucket]:
    """Record counts per fixed price range; all ten ranges, in order"""
    validate_month(month)
    counts = [0] * len(PRICE_RANGE_LABELS)
    for record in repository.find(month):
        counts[price_bucket_index(record.price)] += 1

    return [PriceRangeBucket(range=label, count=n) for label, n in zip(PRICE_RANGE_LABELS, counts)]


def category_histogram(repository: TransactionRepository, month: Optional[int]) -> Dict[str, int]:
    """Record counts per category, sorted by category name; empty categories omitted"""
    validate_month(month)
    counts: Dict[str, int] = {}
    for record in repository.find(month):
        counts[record.category] = counts.get(record.category, 0) + 1

    return dict(sorted(counts.items()))
