"""Unit tests for the seed dataset HTTP client"""

import httpx
import pytest
from datetime import date
from decimal import Decimal
from sales_dashboard.domain.exceptions import SeedSourceError
from sales_dashboard.infrastructure.clients.seed_source import SeedSourceClient, parse_records

SOURCE_URL = "https://example.test/product_transaction.json"


def raw_record(**overrides):
    record = {
        "id": 1,
        "title": "Fjallraven Foldsack No. 1 Backpack",
        "price": 329.85,
        "description": "Your perfect pack for everyday use",
        "category": "men's clothing",
        "image": "https://example.test/backpack.jpg",
        "sold": False,
        "dateOfSale": "2021-11-27T20:29:54+05:30",
    }
    record.update(overrides)
    return record


def client_for(handler) -> SeedSourceClient:
    return SeedSourceClient(timeout=1.0, transport=httpx.MockTransport(handler))


async def test_fetch_records_parses_dataset():
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == SOURCE_URL
        return httpx.Response(200, json=[raw_record(), raw_record(id=2, price=44.6, sold=True)])

    records = await client_for(handler).fetch_records(SOURCE_URL)

    assert len(records) == 2
    first, second = records
    assert first.price == Decimal("329.85")
    assert first.date_of_sale == date(2021, 11, 27)
    assert first.sold is False
    assert first.image == "https://example.test/backpack.jpg"
    assert second.price == Decimal("44.60")
    assert second.sold is True


async def test_fetch_records_http_error():
    client = client_for(lambda request: httpx.Response(503))

    with pytest.raises(SeedSourceError, match="503"):
        await client.fetch_records(SOURCE_URL)


async def test_fetch_records_timeout():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(SeedSourceError, match="timeout"):
        await client_for(handler).fetch_records(SOURCE_URL)


async def test_fetch_records_unreachable():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(SeedSourceError, match="unreachable"):
        await client_for(handler).fetch_records(SOURCE_URL)


async def test_fetch_records_invalid_json():
    client = client_for(lambda request: httpx.Response(200, content=b"<html>oops</html>"))

    with pytest.raises(SeedSourceError, match="invalid JSON"):
        await client.fetch_records(SOURCE_URL)


def test_parse_records_requires_array():
    with pytest.raises(SeedSourceError, match="JSON array"):
        parse_records({"transactions": []})


@pytest.mark.parametrize(
    "overrides",
    [
        {"price": -1},
        {"price": "abc"},
        {"sold": "yes"},
        {"dateOfSale": "not a date"},
        {"id": None},
    ],
)
def test_parse_records_rejects_malformed_record(overrides):
    with pytest.raises(SeedSourceError, match="position 1"):
        parse_records([raw_record(id=10), raw_record(**overrides)])


def test_parse_records_rejects_missing_field():
    record = raw_record()
    del record["category"]

    with pytest.raises(SeedSourceError):
        parse_records([record])


def test_parse_records_rejects_duplicate_ids():
    with pytest.raises(SeedSourceError, match="Duplicate"):
        parse_records([raw_record(id=1), raw_record(id=1)])


def test_parse_records_defaults_optional_fields():
    record = raw_record(description=None)
    del record["image"]

    parsed = parse_records([record])[0]

    assert parsed.description == ""
    assert parsed.image is None
