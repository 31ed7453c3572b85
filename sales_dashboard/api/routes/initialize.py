"""GET/POST /initialize - Seed the store from the remote dataset"""

import time
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from sales_dashboard.api.routes.schemas import InitializeResponse
from sales_dashboard.api.dependencies import get_repository, get_request_id, get_seed_client
from sales_dashboard.config import settings
from sales_dashboard.domain.seeding import seed_from_source
from sales_dashboard.infrastructure.clients.seed_source import SeedSourceClient
from sales_dashboard.domain.repository import TransactionRepository
from sales_dashboard.infrastructure.database.session import get_db
from sales_dashboard.infrastructure.observability.logging import log_seed
from sales_dashboard.infrastructure.observability.metrics import record_seed, seed_duration_histogram

router = APIRouter()


@router.api_route("/initialize", methods=["GET", "POST"], response_model=InitializeResponse)
async def initialize(
    request: Request,
    db: Session = Depends(get_db),
    repository: TransactionRepository = Depends(get_repository),
    seed_client: SeedSourceClient = Depends(get_seed_client),
):
    """
    Replace the store contents with the seed dataset.

    Flow:
    1. Download and validate the full dataset
    2. Delete existing records and insert the new ones
    3. Commit; any failure rolls back so the previous data is kept
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        with seed_duration_histogram.time():
            inserted = await seed_from_source(
                repository,
                seed_client,
                settings.seed_source_url,
                commit=db.commit,
            )
    except Exception:
        db.rollback()
        record_seed(None)
        raise

    duration_ms = (time.time() - start_time) * 1000
    record_seed(inserted)
    log_seed(request_id, settings.seed_source_url, inserted, duration_ms)

    return InitializeResponse(
        message=f"Database initialized with {inserted} transactions",
        inserted=inserted,
    )
