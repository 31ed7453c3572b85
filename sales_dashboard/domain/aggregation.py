"""Combined dashboard view built from the query and statistics functions"""

from typing import Optional

from sales_dashboard.domain.models import CombinedView
from sales_dashboard.domain.query import list_transactions
from sales_dashboard.domain.repository import TransactionRepository
from sales_dashboard.domain.statistics import (
    category_histogram,
    month_statistics,
    price_range_histogram,
)


def combined_view(
    repository: TransactionRepository,
    month: Optional[int] = None,
    search_text: Optional[str] = None,
    page: int = 1,
    page_size: Optional[int] = None,
) -> CombinedView:
    """
    Transactions page, month totals and both chart histograms in one call.

    The four reads are independent and run one after another on the same
    repository (a database session is not safe to share across threads).
    Any failure propagates; there are no partial results.
    """
    return CombinedView(
        transactions=list_transactions(repository, search_text, month, page, page_size),
        statistics=month_statistics(repository, month),
        price_range_histogram=price_range_histogram(repository, month),
        category_histogram=category_histogram(repository, month),
    )
