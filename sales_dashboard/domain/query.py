"""Transaction search and pagination"""

from typing import Optional

from sales_dashboard.config import settings
from sales_dashboard.domain.exceptions import InvalidQueryError
from sales_dashboard.domain.models import TransactionPage, TransactionRecord
from sales_dashboard.domain.repository import TransactionRepository
from sales_dashboard.utils.date_utils import validate_month


def format_price(record: TransactionRecord) -> str:
    """Price as shown on the dashboard and matched by search, e.g. "44.60" """
    return f"{record.price:.2f}"


def matches_search(record: TransactionRecord, search_text: Optional[str]) -> bool:
    """
    Case-insensitive substring match on title, description or formatted price.

    Empty or blank search text matches every record.
    """
    if not search_text or not search_text.strip():
        return True

    needle = search_text.strip().casefold()
    return (
        needle in record.title.casefold()
        or needle in record.description.casefold()
        or needle in format_price(record)
    )


def validate_pagination(page: int, page_size: int) -> None:
    """
    Raises:
        InvalidQueryError: page is below 1 or page_size is outside 1..max_page_size
    """
    if page < 1:
        raise InvalidQueryError(f"page must be >= 1, got {page}")
    if not 1 <= page_size <= settings.max_page_size:
        raise InvalidQueryError(
            f"perPage must be between 1 and {settings.max_page_size}, got {page_size}"
        )


def list_transactions(
    repository: TransactionRepository,
    search_text: Optional[str] = None,
    month: Optional[int] = None,
    page: int = 1,
    page_size: Optional[int] = None,
) -> TransactionPage:
    """
    Search transactions for a month and return one page of results.

    Pages are 1-indexed and ordered by record id. A page past the last
    match is empty rather than an error.

    Args:
        repository: Record store to read from
        search_text: Matched against title, description and price
        month: Calendar month 1-12, or None for all months
        page: 1-indexed page number
        page_size: Records per page (default from settings)

    Raises:
        InvalidQueryError: Invalid month, page or page size
    """
    if page_size is None:
        page_size = settings.default_page_size
    validate_pagination(page, page_size)
    validate_month(month)

    matched = [r for r in repository.find(month) if matches_search(r, search_text)]

    start = (page - 1) * page_size
    return TransactionPage(
        items=matched[start:start + page_size],
        page=page,
        per_page=page_size,
        total_matches=len(matched),
    )
