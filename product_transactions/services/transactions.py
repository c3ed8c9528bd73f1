import logging
from typing import Optional

from sqlalchemy.orm import Session

from product_transactions.core.config import DEFAULT_PER_PAGE
from product_transactions.core.errors import MissingParameter
from product_transactions.db.crud import (
    build_filter,
    count_transactions,
    find_transactions,
    store_errors,
)
from product_transactions.services.months import resolve_month

logger = logging.getLogger(__name__)


def require_month(month: Optional[str]) -> str:
    if month is None or not month.strip():
        raise MissingParameter("Month parameter is required")
    return month


def list_transactions(
    db: Session,
    month: Optional[str],
    search: Optional[str] = "",
    page: int = 1,
    per_page: int = DEFAULT_PER_PAGE,
) -> dict:
    """
    Transactions sold in `month`, optionally narrowed by `search` against
    title, description and price, one page at a time.

    `total` counts every match, ignoring pagination.
    """
    month = require_month(month)
    date_range = resolve_month(month)
    filt = build_filter(date_range, search)

    skip = (page - 1) * per_page
    logger.debug(
        "list_transactions month=%s search=%r skip=%d limit=%d",
        month, search, skip, per_page,
    )

    with store_errors("query transactions"):
        rows = find_transactions(db, filt, skip=skip, limit=per_page)
        total = count_transactions(db, filt)

    return {"transactions": rows, "total": total}
