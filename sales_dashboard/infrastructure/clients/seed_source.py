"""HTTP client for the product-transaction seed dataset"""

import httpx
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List
from sales_dashboard.domain.models import TransactionRecord
from sales_dashboard.domain.exceptions import SeedSourceError
from sales_dashboard.config import settings
from sales_dashboard.utils.date_utils import parse_sale_date


class SeedSourceClient:
    """Client for the remote JSON dataset used to seed the store"""

    def __init__(self, timeout: float | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def fetch_records(self, source_url: str) -> List[TransactionRecord]:
        """
        Download and parse the full dataset.

        Nothing is returned unless every record parses, so callers never
        insert a partial dataset.

        Raises:
            SeedSourceError: On timeout, HTTP errors, or invalid response
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(source_url)
                response.raise_for_status()
                data = response.json()
            except httpx.TimeoutException as e:
                raise SeedSourceError(f"Seed source timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise SeedSourceError(f"Seed source error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise SeedSourceError(f"Seed source unreachable: {e}") from e
            except ValueError as e:
                raise SeedSourceError(f"Seed source returned invalid JSON: {e}") from e

        return parse_records(data)


def parse_records(data: Any) -> List[TransactionRecord]:
    """
    Validate and convert the raw dataset.

    Raises:
        SeedSourceError: Body is not a list, a record is malformed, or ids repeat
    """
    if not isinstance(data, list):
        raise SeedSourceError(f"Expected a JSON array of records, got {type(data).__name__}")

    records = []
    seen_ids = set()
    for position, raw in enumerate(data):
        try:
            record = _parse_record(raw)
        except (KeyError, ValueError, TypeError, InvalidOperation) as e:
            raise SeedSourceError(f"Invalid record at position {position}: {e!r}") from e

        if record.id in seen_ids:
            raise SeedSourceError(f"Duplicate record id {record.id}")
        seen_ids.add(record.id)
        records.append(record)

    return records


def _parse_record(raw: Dict[str, Any]) -> TransactionRecord:
    # str() first so 44.6 becomes Decimal("44.6"), not the binary float expansion
    price = Decimal(str(raw["price"])).quantize(Decimal("0.01"))
    if price < 0:
        raise ValueError(f"negative price {price}")

    sold = raw["sold"]
    if not isinstance(sold, bool):
        raise TypeError(f"sold must be a boolean, got {sold!r}")

    return TransactionRecord(
        id=int(raw["id"]),
        title=str(raw["title"]),
        description=str(raw.get("description") or ""),
        category=str(raw["category"]),
        price=price,
        date_of_sale=parse_sale_date(raw["dateOfSale"]),
        sold=sold,
        image=raw.get("image"),
    )
