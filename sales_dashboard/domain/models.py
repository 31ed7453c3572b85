"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional


@dataclass(frozen=True)
class TransactionRecord:
    """Product sale record imported from the seed dataset"""

    id: int
    title: str
    description: str
    category: str
    price: Decimal
    date_of_sale: date
    sold: bool
    image: Optional[str] = None


@dataclass
class TransactionPage:
    """One page of search results"""

    items: List[TransactionRecord]
    page: int
    per_page: int
    total_matches: int

    @property
    def matched_on_page(self) -> int:
        return len(self.items)


@dataclass
class MonthStatistics:
    """Sales totals for a month"""

    total_sale_amount: Decimal
    sold_count: int
    unsold_count: int


@dataclass
class PriceRangeBucket:
    """Single bar in the price-range chart"""

    range: str
    count: int


@dataclass
class CombinedView:
    """Everything the dashboard needs for one month in a single payload"""

    transactions: TransactionPage
    statistics: MonthStatistics
    price_range_histogram: List[PriceRangeBucket]
    category_histogram: Dict[str, int] = field(default_factory=dict)
