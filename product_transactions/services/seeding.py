import logging
from typing import List, Optional

import requests
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from product_transactions.core.config import (
    SEED_CONNECT_TIMEOUT,
    SEED_READ_TIMEOUT,
    SEED_URL,
)
from product_transactions.core.errors import UpstreamFetchFailure
from product_transactions.db.crud import replace_transactions, store_errors
from product_transactions.schemas.seed import SeedRecord

logger = logging.getLogger(__name__)

_records_adapter = TypeAdapter(List[SeedRecord])


def fetch_seed_records(url: str = SEED_URL) -> List[SeedRecord]:
    try:
        r = requests.get(url, timeout=(SEED_CONNECT_TIMEOUT, SEED_READ_TIMEOUT))
        r.raise_for_status()
        payload = r.json()
    except requests.RequestException as e:
        raise UpstreamFetchFailure("Failed to fetch seed data", details=str(e)) from e
    except ValueError as e:
        # requests' JSONDecodeError subclasses ValueError
        raise UpstreamFetchFailure("Seed data is not valid JSON", details=str(e)) from e

    try:
        return _records_adapter.validate_python(payload)
    except ValidationError as e:
        raise UpstreamFetchFailure(
            "Seed data has an unexpected shape",
            details=e.errors(include_url=False, include_context=False, include_input=False),
        ) from e


def initialize_database(db: Session, url: Optional[str] = None) -> dict:
    """
    Replace the stored transactions with a fresh copy of the upstream dataset.

    Not guarded against concurrent calls: two overlapping seeds each clear and
    insert, and whichever commits last wins (or the second fails on ids).
    """
    url = url or SEED_URL
    logger.info("Seeding transactions from %s", url)

    records = fetch_seed_records(url)
    with store_errors("store seed data"):
        count = replace_transactions(db, [rec.to_row() for rec in records])

    logger.info("Seeded %d transactions", count)
    return {"message": "Database initialized successfully", "count": count}
